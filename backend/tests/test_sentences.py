from fastapi.testclient import TestClient
from wordly.main import app

client = TestClient(app)


def test_add_and_list_sentences():
    r = client.post('/sentence', json={'sentence': 'I Ran fast'})
    assert r.status_code == 201
    body = r.json()
    assert body['message'] == 'Sentence added successfully'
    assert body['entry']['sentence'] == 'I Ran fast'

    # no dedup: the same text is stored twice
    client.post('/sentence', json={'sentence': 'I Ran fast'})
    all_sentences = client.get('/sentence/all').json()
    assert [s['sentence'] for s in all_sentences] == ['I Ran fast', 'I Ran fast']


def test_add_sentence_requires_text():
    r = client.post('/sentence', json={})
    assert r.status_code == 400
    assert r.json() == {'message': 'Sentence is required'}


def test_search_is_case_insensitive_substring():
    client.post('/sentence', json={'sentence': 'I Ran fast'})
    client.post('/sentence', json={'sentence': 'She sings'})
    r = client.get('/sentence/ran')
    assert r.status_code == 200
    assert [s['sentence'] for s in r.json()] == ['I Ran fast']


def test_search_without_match_is_404():
    client.post('/sentence', json={'sentence': 'She sings'})
    r = client.get('/sentence/dance')
    assert r.status_code == 404
    assert r.json() == {'message': 'No sentences found containing the word'}


def test_add_sentence_without_body():
    r = client.post('/sentence')
    assert r.status_code == 400
    assert r.json() == {'message': 'Sentence is required'}
