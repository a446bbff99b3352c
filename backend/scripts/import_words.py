"""CLI script to import a JSON export into the backend DB.
Usage: python scripts/import_words.py path/to/export.json

The export is an object with any of the keys `words`, `sentences`,
`phrasalverbs` and `prepositions`, each holding a list of records shaped
like the matching POST body. Word entries are merged by date exactly as
`POST /words` does.
"""
import sys
import json
import argparse
import pathlib
# Ensure `backend/` is on sys.path so `wordly` package imports work when running this script directly
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
from sqlmodel import Session
from wordly.database import engine, create_db_and_tables
from wordly import services
from wordly.errors import WordlyError


def import_records(session: Session, data: dict) -> dict:
    """Feed every record of `data` through the services.

    Returns per-collection counts of imported records and a list of
    `{collection, index, error}` items for records that were rejected.
    """
    summary = {'words': 0, 'sentences': 0, 'phrasalverbs': 0, 'prepositions': 0, 'errors': []}
    words = services.WordService(session)
    sentences = services.SentenceService(session)
    verbs = services.PhrasalVerbService(session)
    preps = services.PrepositionService(session)
    handlers = {
        'words': lambda r: words.upsert(r.get('date'), r.get('words')),
        'sentences': lambda r: sentences.add(r.get('sentence')),
        'phrasalverbs': lambda r: verbs.add(r.get('genere'), r.get('phrase'), r.get('ans')),
        'prepositions': lambda r: preps.add(r.get('genre'), r.get('preposition'), r.get('example_sentence'), r.get('descrp')),
    }
    for collection, handler in handlers.items():
        for idx, record in enumerate(data.get(collection) or []):
            if not isinstance(record, dict):
                summary['errors'].append({'collection': collection, 'index': idx, 'error': 'record must be an object'})
                continue
            try:
                handler(record)
            except WordlyError as e:
                summary['errors'].append({'collection': collection, 'index': idx, 'error': e.message})
                continue
            summary[collection] += 1
    return summary


def main(path: pathlib.Path):
    """Load `path` and import it, printing a short summary to stdout."""
    if not path.exists():
        print(f'Export file not found at {path}')
        return
    data = json.loads(path.read_text(encoding='utf-8'))
    if not isinstance(data, dict):
        print('Export must be a JSON object')
        return
    create_db_and_tables()
    with Session(engine) as session:
        summary = import_records(session, data)
    for collection in ('words', 'sentences', 'phrasalverbs', 'prepositions'):
        print(f'Imported {collection}: {summary[collection]}')
    for err in summary['errors']:
        print(f"Error in {err['collection']}[{err['index']}]: {err['error']}")

if __name__ == '__main__':
    parser = argparse.ArgumentParser()
    parser.add_argument('path', type=pathlib.Path, help='JSON export to import')
    args = parser.parse_args()
    main(args.path)
