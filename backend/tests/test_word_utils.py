from wordly.utils.words import flatten_words, month_of, parse_leading_int, word_matches


def test_flatten_words_keeps_order_and_duplicates():
    maps = [{'a': ['1'], 'b': ['2']}, {'a': ['3']}, {}]
    assert flatten_words(maps) == [{'a': ['1']}, {'b': ['2']}, {'a': ['3']}]


def test_word_matches_key_or_definition():
    assert word_matches('Run', ['to move fast'], 'run')
    assert word_matches('run', ['To Move Fast'], 'to move FAST')
    assert not word_matches('running', ['moving'], 'run')


def test_parse_leading_int():
    assert parse_leading_int('07') == 7
    assert parse_leading_int('7th') == 7
    assert parse_leading_int('abc') is None
    assert parse_leading_int(None) is None


def test_month_of():
    assert month_of('01/07/2024') == 7
    assert month_of('31/12/1999') == 12
    assert month_of('2024-07-01') is None
    assert month_of('') is None
