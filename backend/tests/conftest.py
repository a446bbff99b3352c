import os
import shutil
import tempfile
from pathlib import Path
import pytest

# Point the app at a throwaway SQLite file before `wordly` is imported.
_TMP_DIR = Path(tempfile.mkdtemp(prefix="wordly-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP_DIR / 'test.db'}"


def pytest_sessionfinish(session, exitstatus):
    """Close pooled connections and remove the temporary database directory."""
    from wordly.database import engine
    engine.dispose()
    shutil.rmtree(_TMP_DIR, ignore_errors=True)


@pytest.fixture(autouse=True)
def reset_db():
    """Give every test empty tables."""
    from sqlmodel import SQLModel
    from wordly.database import engine, create_db_and_tables
    SQLModel.metadata.drop_all(engine)
    create_db_and_tables()
    yield


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from wordly.main import app
    return TestClient(app)
