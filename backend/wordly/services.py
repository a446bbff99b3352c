"""Business logic services used by HTTP controllers.

This module holds one small service class per collection. Services are
intentionally thin: they perform presence checks, run the filtering and
merge logic, persist through repositories and raise the domain errors
from `errors.py`. They return plain dicts/lists ready for JSON
serialization.
"""

import logging
from typing import Dict, List, Optional
from sqlmodel import Session
from . import models, repositories
from .errors import NotFoundError, StoreError, ValidationError
from .utils.words import flatten_words, month_of, parse_leading_int, word_matches

logger = logging.getLogger("wordly.services")


def entry_to_dict(entry: models.WordEntry) -> dict:
    return {'id': entry.id, 'date': entry.date, 'words': entry.words}


def sentence_to_dict(sentence: models.Sentence) -> dict:
    return {'id': sentence.id, 'sentence': sentence.sentence}


def phrasal_verb_to_dict(verb: models.PhrasalVerb) -> dict:
    return {'id': verb.id, 'genere': verb.genere, 'phrase': verb.phrase, 'ans': verb.ans}


def preposition_to_dict(prep: models.Preposition) -> dict:
    return {
        'id': prep.id,
        'genre': prep.genre,
        'preposition': prep.preposition,
        'example_sentence': prep.example_sentence,
        'descrp': prep.descrp,
    }


class WordService:
    """Date-keyed word lists: listing, merging upserts and lookups."""
    def __init__(self, session: Session):
        self.session = session
        self.repo = repositories.WordEntryRepository(session)

    def list_entries(self) -> List[dict]:
        return [entry_to_dict(e) for e in self.repo.list_all()]

    def list_flattened(self) -> List[dict]:
        """Every word of every entry as `{word: definitions}`, duplicates kept."""
        return flatten_words(e.words for e in self.repo.list_all())

    def upsert(self, date: Optional[str], words: Optional[Dict[str, List[str]]]):
        """Create the entry for `date` or merge `words` into it.

        Existing keys are never overwritten. Returns `(created, payload)`
        where `created` tells the controller to answer 201 instead of 200.
        The merge is written only if no other request updated the date since
        it was read; a lost race raises `StoreError` instead of dropping the
        other request's words.
        """
        if not date or not words:
            raise ValidationError('Date and words are required')
        existing = self.repo.get_by_date(date)
        if existing is None:
            entry = self.repo.create(models.WordEntry(date=date, words=dict(words)))
            logger.info("created word entry for %s with %d words", date, len(words))
            return True, {'message': 'Words added successfully', 'entry': entry_to_dict(entry)}

        merged = dict(existing.words or {})
        already_present = []
        added = []
        for key, definitions in words.items():
            if key in merged:
                already_present.append(key)
            else:
                merged[key] = definitions
                added.append(key)
        entry = self.repo.set_words(existing, merged)
        logger.info("merged words for %s: %d added, %d already present", date, len(added), len(already_present))

        message = 'Words updated successfully.'
        if already_present:
            message += f" The following words were already present and not added: {', '.join(already_present)}"
        if added:
            message += f" The following new words were added: {', '.join(added)}"
        return False, {'message': message, 'entry': entry.words}

    def lookup_word(self, word: str) -> dict:
        """Return `{key: definitions}` for the first key or definition equal to `word`.

        Matching ignores case and is exact (no substring match). Entries
        are scanned in storage order.
        """
        for entry in self.repo.list_all():
            for key, definitions in (entry.words or {}).items():
                if word_matches(key, definitions, word):
                    return {key: definitions}
        raise NotFoundError('Word not found')

    def by_date(self, date: Optional[str]) -> dict:
        if not date:
            raise ValidationError('Date is required')
        entry = self.repo.get_by_date(date)
        if entry is None:
            raise NotFoundError('No words found for this date')
        return entry_to_dict(entry)

    def by_dates(self, dates: Optional[List[str]]) -> List[dict]:
        """Flattened words for every entry whose date is in `dates`."""
        if dates is None or not isinstance(dates, list):
            raise ValidationError('Array of dates is required')
        return flatten_words(e.words for e in self.repo.list_by_dates(dates))

    def by_month(self, raw_month: Optional[str]) -> List[dict]:
        """Flattened words of entries whose `DD/MM/YYYY` month equals `raw_month`."""
        month = parse_leading_int(raw_month)
        if not month or month < 1 or month > 12:
            raise ValidationError('Invalid month. Please provide a month between 1 and 12.')
        entries = [e for e in self.repo.list_all() if month_of(e.date) == month]
        words = flatten_words(e.words for e in entries)
        if not words:
            raise NotFoundError(f'No words found for month: {month}')
        return words


class SentenceService:
    """Example sentences: add, list and case-insensitive search."""
    def __init__(self, session: Session):
        self.session = session
        self.repo = repositories.SentenceRepository(session)

    def add(self, sentence: Optional[str]) -> dict:
        if not sentence:
            raise ValidationError('Sentence is required')
        created = self.repo.create(models.Sentence(sentence=sentence))
        return {'message': 'Sentence added successfully', 'entry': sentence_to_dict(created)}

    def list_all(self) -> List[dict]:
        return [sentence_to_dict(s) for s in self.repo.list_all()]

    def search(self, word: str) -> List[dict]:
        """Sentences containing `word` as a substring, ignoring case."""
        needle = word.lower()
        matches = [sentence_to_dict(s) for s in self.repo.list_all() if needle in (s.sentence or '').lower()]
        if not matches:
            raise NotFoundError('No sentences found containing the word')
        return matches


class PhrasalVerbService:
    """Phrasal verbs: add, list and filter by `genere`."""
    def __init__(self, session: Session):
        self.session = session
        self.repo = repositories.PhrasalVerbRepository(session)

    def list_all(self) -> List[dict]:
        return [phrasal_verb_to_dict(v) for v in self.repo.list_all()]

    def add(self, genere: Optional[str], phrase: Optional[str], ans: Optional[str]) -> dict:
        if not phrase or not ans:
            raise ValidationError('Phrase and answer are required')
        created = self.repo.create(models.PhrasalVerb(genere=genere, phrase=phrase, ans=ans))
        return {'message': 'Phrasal verb added successfully', 'entry': phrasal_verb_to_dict(created)}

    def by_genere(self, genere: str) -> List[dict]:
        """Only `phrase` and `ans` of the verbs tagged `genere`."""
        verbs = self.repo.list_by_genere(genere)
        if not verbs:
            raise NotFoundError(f'No phrasal verbs found for genere: {genere}')
        return [{'phrase': v.phrase, 'ans': v.ans} for v in verbs]


class PrepositionService:
    """Prepositions: add, list and filter by `genre`."""
    def __init__(self, session: Session):
        self.session = session
        self.repo = repositories.PrepositionRepository(session)

    def list_all(self) -> List[dict]:
        return [preposition_to_dict(p) for p in self.repo.list_all()]

    def by_genre(self, genre: str) -> List[dict]:
        # an empty result is a valid answer here, not a 404
        return [preposition_to_dict(p) for p in self.repo.list_by_genre(genre)]

    def add(self, genre: Optional[str], preposition: Optional[str], example_sentence: Optional[str], descrp: Optional[str]) -> dict:
        """Insert a preposition without pre-checking required fields.

        The store rejects rows missing `preposition` or `example_sentence`;
        any store failure on this path is reported as a validation error.
        """
        prep = models.Preposition(genre=genre, preposition=preposition, example_sentence=example_sentence, descrp=descrp)
        try:
            created = self.repo.create(prep)
        except StoreError as e:
            raise ValidationError(e.message) from e
        return preposition_to_dict(created)
