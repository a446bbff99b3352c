"""SQLModel data models.

This module defines the application's four collections as database
tables. The collections are independent; there are no relationships or
foreign keys between them.
"""

from typing import Dict, List, Optional
from sqlalchemy import CheckConstraint, Column, JSON
from sqlmodel import SQLModel, Field


class WordEntry(SQLModel, table=True):
    """Words learned on a given day.

    Fields:
    - `date`: the day as a `DD/MM/YYYY` string (stored as given, not parsed)
    - `words`: mapping of word -> ordered list of definitions, stored as a
      JSON document. Keys are unique and case-sensitive as stored.
    - `version`: bumped on every words update; an update only applies when
      the version it read is still current.
    """
    __tablename__ = "word_entries"

    id: Optional[int] = Field(default=None, primary_key=True)
    date: str = Field(index=True, unique=True, nullable=False)
    words: Dict[str, List[str]] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
    version: int = Field(default=1, nullable=False)


class Sentence(SQLModel, table=True):
    """A free-standing example sentence."""
    __tablename__ = "sentences"

    id: Optional[int] = Field(default=None, primary_key=True)
    sentence: str = Field(nullable=False)


class PhrasalVerb(SQLModel, table=True):
    """A phrasal verb with its answer and an optional category tag."""
    __tablename__ = "phrasal_verbs"

    id: Optional[int] = Field(default=None, primary_key=True)
    genere: Optional[str] = Field(default=None, index=True)
    phrase: str = Field(nullable=False)
    ans: str = Field(nullable=False)


class Preposition(SQLModel, table=True):
    """A preposition with an example sentence.

    `preposition` and `example_sentence` are NOT NULL and must not be
    empty; inserts breaking either rule are rejected by the store itself.
    """
    __tablename__ = "prepositions"
    __table_args__ = (
        CheckConstraint("preposition <> ''", name="ck_prepositions_preposition_not_empty"),
        CheckConstraint("example_sentence <> ''", name="ck_prepositions_example_sentence_not_empty"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    genre: Optional[str] = Field(default=None, index=True)
    preposition: str = Field(nullable=False)
    example_sentence: str = Field(nullable=False)
    descrp: Optional[str] = None
