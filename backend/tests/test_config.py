import pytest

from wordly.config import Settings


def test_defaults(monkeypatch):
    for name in ('ENV', 'PORT', 'ALLOW_DEV_CORS', 'DB_ECHO', 'LOG_LEVEL'):
        monkeypatch.delenv(name, raising=False)
    s = Settings()
    assert s.ENV == 'dev'
    assert s.PORT == 3000
    assert s.ALLOW_DEV_CORS is True
    assert s.DB_ECHO is False
    assert s.LOG_LEVEL == 'INFO'


def test_invalid_port_rejected(monkeypatch):
    monkeypatch.setenv('PORT', '70000')
    with pytest.raises(RuntimeError):
        Settings()


def test_empty_database_url_rejected(monkeypatch):
    monkeypatch.setenv('DATABASE_URL', '  ')
    with pytest.raises(RuntimeError):
        Settings()
