import importlib.util
from pathlib import Path

from sqlmodel import Session

from wordly.database import engine
from wordly import services

_SCRIPT = Path(__file__).resolve().parents[1] / 'scripts' / 'import_words.py'
_spec = importlib.util.spec_from_file_location('import_words', _SCRIPT)
import_words = importlib.util.module_from_spec(_spec)
_spec.loader.exec_module(import_words)


def test_import_records_merges_and_reports_errors():
    data = {
        'words': [
            {'date': '01/07/2024', 'words': {'run': ['to move fast']}},
            {'date': '01/07/2024', 'words': {'run': ['x'], 'jump': ['to leap']}},
            {'date': '02/07/2024'},
        ],
        'sentences': [{'sentence': 'I Ran fast'}, 'not a record'],
        'phrasalverbs': [{'phrase': 'give up', 'ans': 'to stop trying'}],
        'prepositions': [{'preposition': 'on'}],
    }
    with Session(engine) as session:
        summary = import_words.import_records(session, data)
        entries = services.WordService(session).list_entries()

    assert summary['words'] == 2
    assert summary['sentences'] == 1
    assert summary['phrasalverbs'] == 1
    assert summary['prepositions'] == 0
    assert {(e['collection'], e['index']) for e in summary['errors']} == {
        ('words', 2), ('sentences', 1), ('prepositions', 0),
    }
    assert len(entries) == 1
    assert entries[0]['words'] == {'run': ['to move fast'], 'jump': ['to leap']}
