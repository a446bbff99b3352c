from fastapi.testclient import TestClient
from wordly.main import app

client = TestClient(app)


def test_add_and_list_phrasal_verbs():
    r = client.post('/phrasalverbs', json={'genere': 'travel', 'phrase': 'set off', 'ans': 'to start a journey'})
    assert r.status_code == 201
    assert r.json()['message'] == 'Phrasal verb added successfully'
    r = client.post('/phrasalverbs', json={'phrase': 'give up', 'ans': 'to stop trying'})
    assert r.status_code == 201
    assert r.json()['entry']['genere'] is None

    verbs = client.get('/phrasalverbs/all').json()
    assert [(v['genere'], v['phrase'], v['ans']) for v in verbs] == [
        ('travel', 'set off', 'to start a journey'),
        (None, 'give up', 'to stop trying'),
    ]


def test_add_requires_phrase_and_answer():
    r = client.post('/phrasalverbs', json={'genere': 'travel', 'phrase': 'set off'})
    assert r.status_code == 400
    assert r.json() == {'message': 'Phrase and answer are required'}
    r = client.post('/phrasalverbs', json={'ans': 'to start a journey'})
    assert r.status_code == 400


def test_lookup_by_genere_projects_phrase_and_answer():
    client.post('/phrasalverbs', json={'genere': 'travel', 'phrase': 'set off', 'ans': 'to start a journey'})
    client.post('/phrasalverbs', json={'genere': 'work', 'phrase': 'take on', 'ans': 'to hire'})
    r = client.get('/phrasalverbs/travel')
    assert r.status_code == 200
    assert r.json() == [{'phrase': 'set off', 'ans': 'to start a journey'}]


def test_lookup_by_genere_is_exact():
    client.post('/phrasalverbs', json={'genere': 'travel', 'phrase': 'set off', 'ans': 'to start a journey'})
    r = client.get('/phrasalverbs/Travel')
    assert r.status_code == 404
    assert r.json() == {'message': 'No phrasal verbs found for genere: Travel'}


def test_add_without_body():
    r = client.post('/phrasalverbs')
    assert r.status_code == 400
    assert r.json() == {'message': 'Phrase and answer are required'}
