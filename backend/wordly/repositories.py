"""Repository classes encapsulating database operations.

Each repository is small and focused on a single collection (word
entries, sentences, phrasal verbs, prepositions). Repositories return
SQLModel objects, perform commits/refreshes where appropriate, and
report every store failure as `StoreError` via `store_errors`.
"""

import logging
from typing import Dict, List, Optional
from sqlalchemy import update
from sqlmodel import Session, select
from . import models
from .database import store_errors
from .errors import StoreError

logger = logging.getLogger("wordly.db")


class WordEntryRepository:
    """Insert, find and update `WordEntry` rows."""
    def __init__(self, session: Session):
        self.session = session

    def list_all(self) -> List[models.WordEntry]:
        """Return every entry in insertion order."""
        with store_errors(self.session):
            stmt = select(models.WordEntry).order_by(models.WordEntry.id)
            return self.session.exec(stmt).all()

    def get_by_date(self, date: str) -> Optional[models.WordEntry]:
        """Return the entry for `date` or `None`."""
        with store_errors(self.session):
            stmt = select(models.WordEntry).where(models.WordEntry.date == date)
            return self.session.exec(stmt).first()

    def list_by_dates(self, dates: List[str]) -> List[models.WordEntry]:
        """Return entries whose date is one of `dates`."""
        if not dates:
            return []
        with store_errors(self.session):
            stmt = select(models.WordEntry).where(models.WordEntry.date.in_(dates)).order_by(models.WordEntry.id)
            return self.session.exec(stmt).all()

    def create(self, entry: models.WordEntry) -> models.WordEntry:
        """Persist a new entry and return the managed instance."""
        with store_errors(self.session):
            self.session.add(entry)
            self.session.commit()
            self.session.refresh(entry)
            return entry

    def set_words(self, entry: models.WordEntry, words: Dict[str, List[str]]) -> models.WordEntry:
        """Replace the stored words map of `entry` and commit.

        The update only applies if the row still carries the version that
        was read with `entry`; otherwise another writer got there first and
        `StoreError` is raised with nothing written.
        """
        entry_id, date, version = entry.id, entry.date, entry.version
        table = models.WordEntry.__table__
        stmt = (
            update(table)
            .where(table.c.id == entry_id, table.c.version == version)
            .values(words=dict(words), version=version + 1)
        )
        with store_errors(self.session):
            result = self.session.connection().execute(stmt)
            if result.rowcount != 1:
                self.session.rollback()
                logger.warning("stale words update for %s at version %d", date, version)
                raise StoreError(f"Words for {date} were changed by another request; nothing was updated")
            self.session.commit()
            self.session.refresh(entry)
            return entry


class SentenceRepository:
    """CRUD operations for `Sentence` records."""
    def __init__(self, session: Session):
        self.session = session

    def create(self, sentence: models.Sentence) -> models.Sentence:
        with store_errors(self.session):
            self.session.add(sentence)
            self.session.commit()
            self.session.refresh(sentence)
            return sentence

    def list_all(self) -> List[models.Sentence]:
        with store_errors(self.session):
            stmt = select(models.Sentence).order_by(models.Sentence.id)
            return self.session.exec(stmt).all()


class PhrasalVerbRepository:
    """CRUD operations for `PhrasalVerb` records."""
    def __init__(self, session: Session):
        self.session = session

    def create(self, verb: models.PhrasalVerb) -> models.PhrasalVerb:
        with store_errors(self.session):
            self.session.add(verb)
            self.session.commit()
            self.session.refresh(verb)
            return verb

    def list_all(self) -> List[models.PhrasalVerb]:
        with store_errors(self.session):
            stmt = select(models.PhrasalVerb).order_by(models.PhrasalVerb.id)
            return self.session.exec(stmt).all()

    def list_by_genere(self, genere: str) -> List[models.PhrasalVerb]:
        """Return phrasal verbs tagged exactly `genere`."""
        with store_errors(self.session):
            stmt = select(models.PhrasalVerb).where(models.PhrasalVerb.genere == genere).order_by(models.PhrasalVerb.id)
            return self.session.exec(stmt).all()


class PrepositionRepository:
    """CRUD operations for `Preposition` records."""
    def __init__(self, session: Session):
        self.session = session

    def create(self, preposition: models.Preposition) -> models.Preposition:
        """Persist a preposition; NOT NULL and empty-value violations surface as `StoreError`."""
        with store_errors(self.session):
            self.session.add(preposition)
            self.session.commit()
            self.session.refresh(preposition)
            return preposition

    def list_all(self) -> List[models.Preposition]:
        with store_errors(self.session):
            stmt = select(models.Preposition).order_by(models.Preposition.id)
            return self.session.exec(stmt).all()

    def list_by_genre(self, genre: str) -> List[models.Preposition]:
        """Return prepositions tagged exactly `genre`."""
        with store_errors(self.session):
            stmt = select(models.Preposition).where(models.Preposition.genre == genre).order_by(models.Preposition.id)
            return self.session.exec(stmt).all()
