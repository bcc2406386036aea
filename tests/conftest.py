import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings, build_jwt_settings
from app.db.session import Database
from app.db.repositories.sessions import SessionRepository
from app.db.repositories.notes import NoteRepository
from app.db.repositories.links import LinkRepository
from app.features.authentication.services import AuthService
from app.main import create_app

USER_KEY = "correct-horse-battery-staple"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        ADDR="127.0.0.1",
        PORT=8080,
        ENV="test",
        USER_KEY=USER_KEY,
        JWT_KEY="test-signing-key",
        SQLITE_PATH=":memory:",
    )


@pytest.fixture
def database():
    db = Database("sqlite:///:memory:").open()
    yield db
    db.close()


@pytest.fixture
def session(database):
    with database.session() as s:
        yield s


@pytest.fixture
def session_repo(session):
    return SessionRepository(session)

@pytest.fixture
def note_repo(session):
    return NoteRepository(session)

@pytest.fixture
def link_repo(session):
    return LinkRepository(session)


@pytest.fixture
def auth_service(settings, session_repo) -> AuthService:
    return AuthService(
        session_repo=session_repo,
        jwt_settings=build_jwt_settings(settings),
        user_key=settings.USER_KEY,
    )


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def auth_headers(client):
    res = client.post("/login", json={"key": USER_KEY})
    assert res.status_code == 200
    return {"Authorization": f"Bearer {res.json()['token']}"}
