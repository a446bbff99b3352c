"""FastAPI application entrypoint and HTTP controllers.

This module defines the HTTP endpoints of the Wordly vocabulary API.
Controllers are intentionally thin: they accept requests, delegate to
services, and return JSON responses. Every error is rendered as
`{"message": ...}`.

Endpoints implemented:
- GET /words
- GET /words/all
- POST /words
- GET /words/{word}
- POST /words/date
- POST /words/all
- GET /words/month/{month}
- POST /sentence
- GET /sentence/all
- GET /sentence/{word}
- GET /phrasalverbs/all
- POST /phrasalverbs
- GET /phrasalverbs/{genere}
- GET /preposition/all
- GET /preposition/{genre}
- POST /preposition
- GET /health
"""

from typing import Optional
from fastapi import FastAPI, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session
from starlette.exceptions import HTTPException as StarletteHTTPException
import json
import logging
import time
import uuid
from .database import create_db_and_tables, get_session
from . import services
from .errors import WordlyError
from .schemas import WordsIn, DateIn, DatesIn, SentenceIn, PhrasalVerbIn, PrepositionIn
from .config import settings

app = FastAPI(title="Wordly API")
logger = logging.getLogger("wordly.api")
if not logger.handlers:
    logging.basicConfig(level=settings.LOG_LEVEL)

if settings.ALLOW_DEV_CORS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# The store may be unreachable at boot; keep serving and let requests fail with 500.
try:
    create_db_and_tables()
except SQLAlchemyError:
    logger.exception("database initialisation failed; requests will fail until the store is reachable")


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
    request.state.request_id = req_id
    started = time.perf_counter()
    response: Response
    try:
        response = await call_next(request)
    except Exception:
        elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
        logger.exception(
            "request_failed %s",
            json.dumps(
                {
                    "request_id": req_id,
                    "path": request.url.path,
                    "method": request.method,
                    "duration_ms": elapsed_ms,
                    "client": request.client.host if request.client else "unknown",
                },
                ensure_ascii=True,
            ),
        )
        raise
    response.headers["X-Request-ID"] = req_id
    elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
    logger.info(
        "request_done %s",
        json.dumps(
            {
                "request_id": req_id,
                "path": request.url.path,
                "method": request.method,
                "status_code": response.status_code,
                "duration_ms": elapsed_ms,
                "client": request.client.host if request.client else "unknown",
            },
            ensure_ascii=True,
        ),
    )
    return response


@app.exception_handler(WordlyError)
async def wordly_error_handler(request: Request, exc: WordlyError):
    if exc.http_status >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.http_status, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    problems = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        problems.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    logger.warning("invalid request on %s: %s", request.url.path, problems)
    return JSONResponse(status_code=400, content={"message": "Invalid request: " + "; ".join(problems)})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)}, headers=exc.headers)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("unhandled exception at %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


# Literal paths are registered before their parameterised siblings.

@app.get('/words')
def list_word_entries(db: Session = Depends(get_session)):
    """List every date entry with its full words map."""
    return services.WordService(db).list_entries()


@app.get('/words/all')
def list_all_words(db: Session = Depends(get_session)):
    """List every word from every date as single-key objects."""
    return services.WordService(db).list_flattened()


@app.post('/words')
def upsert_words(payload: Optional[WordsIn] = None, db: Session = Depends(get_session)):
    """Create the entry for a date, or merge new words into it.

    Answers 201 when the date is new and 200 when words were merged.
    Words already stored for the date are never overwritten.
    """
    payload = payload or WordsIn()
    created, body = services.WordService(db).upsert(payload.date, payload.words)
    return JSONResponse(status_code=201 if created else 200, content=body)


@app.post('/words/date')
def words_for_date(payload: Optional[DateIn] = None, db: Session = Depends(get_session)):
    """Return the entry stored for the `DD/MM/YYYY` date in the body."""
    payload = payload or DateIn()
    return services.WordService(db).by_date(payload.date)


@app.post('/words/all')
def words_for_dates(payload: Optional[DatesIn] = None, db: Session = Depends(get_session)):
    """Return the flattened words of every date listed in the body."""
    payload = payload or DatesIn()
    return services.WordService(db).by_dates(payload.dates)


@app.get('/words/month/{month}')
def words_for_month(month: str, db: Session = Depends(get_session)):
    """Return the flattened words of every entry in the given month (1-12)."""
    return services.WordService(db).by_month(month)


@app.get('/words/{word}')
def lookup_word(word: str, db: Session = Depends(get_session)):
    """Find a word by key or by one of its definitions, ignoring case."""
    return services.WordService(db).lookup_word(word)


@app.post('/sentence', status_code=201)
def add_sentence(payload: Optional[SentenceIn] = None, db: Session = Depends(get_session)):
    payload = payload or SentenceIn()
    return services.SentenceService(db).add(payload.sentence)


@app.get('/sentence/all')
def list_sentences(db: Session = Depends(get_session)):
    return services.SentenceService(db).list_all()


@app.get('/sentence/{word}')
def search_sentences(word: str, db: Session = Depends(get_session)):
    """Sentences containing `word`, ignoring case."""
    return services.SentenceService(db).search(word)


@app.get('/phrasalverbs/all')
def list_phrasal_verbs(db: Session = Depends(get_session)):
    return services.PhrasalVerbService(db).list_all()


@app.post('/phrasalverbs', status_code=201)
def add_phrasal_verb(payload: Optional[PhrasalVerbIn] = None, db: Session = Depends(get_session)):
    payload = payload or PhrasalVerbIn()
    return services.PhrasalVerbService(db).add(payload.genere, payload.phrase, payload.ans)


@app.get('/phrasalverbs/{genere}')
def phrasal_verbs_for_genere(genere: str, db: Session = Depends(get_session)):
    """Only `phrase` and `ans` of the phrasal verbs tagged `genere`."""
    return services.PhrasalVerbService(db).by_genere(genere)


@app.get('/preposition/all')
def list_prepositions(db: Session = Depends(get_session)):
    return services.PrepositionService(db).list_all()


@app.get('/preposition/{genre}')
def prepositions_for_genre(genre: str, db: Session = Depends(get_session)):
    return services.PrepositionService(db).by_genre(genre)


@app.post('/preposition', status_code=201)
def add_preposition(payload: Optional[PrepositionIn] = None, db: Session = Depends(get_session)):
    """Insert a preposition; missing required fields are rejected by the store (400)."""
    payload = payload or PrepositionIn()
    return services.PrepositionService(db).add(payload.genre, payload.preposition, payload.example_sentence, payload.descrp)


@app.get("/health")
def health():
    """Lightweight health check for uptime monitoring."""
    return {"status": "ok"}
