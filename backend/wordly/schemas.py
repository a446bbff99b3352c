"""Pydantic request schemas used by the API.

Every field is optional at the schema level: presence checks happen in
the services so that missing input produces the collection-specific
400 message rather than a generic validation error. Type mismatches
(e.g. `dates` sent as a string) are still rejected by pydantic.
"""

from pydantic import BaseModel
from typing import Dict, List, Optional


class WordsIn(BaseModel):
    """Payload for `POST /words`."""
    date: Optional[str] = None
    words: Optional[Dict[str, List[str]]] = None


class DateIn(BaseModel):
    """Payload for `POST /words/date`."""
    date: Optional[str] = None


class DatesIn(BaseModel):
    """Payload for `POST /words/all`."""
    dates: Optional[List[str]] = None


class SentenceIn(BaseModel):
    sentence: Optional[str] = None


class PhrasalVerbIn(BaseModel):
    genere: Optional[str] = None
    phrase: Optional[str] = None
    ans: Optional[str] = None


class PrepositionIn(BaseModel):
    """Payload for `POST /preposition`.

    No presence check is made before insertion; required columns are
    enforced by the store.
    """
    genre: Optional[str] = None
    preposition: Optional[str] = None
    example_sentence: Optional[str] = None
    descrp: Optional[str] = None
