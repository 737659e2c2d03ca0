import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from models.database import Base, build_engine, get_db, init_db
from main import app


@pytest.fixture
def engine():
    """A fresh in-memory SQLite database shared by every connection of one test."""
    engine = build_engine("sqlite://", poolclass=StaticPool)
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_post(client):
    """Create a post through the API and return its JSON."""
    def _make_post(**fields):
        body = {"content": "Hello world"}
        body.update(fields)
        response = client.post("/api/posts", json=body)
        assert response.status_code == 200, response.text
        return response.json()
    return _make_post


@pytest.fixture
def make_comment(client):
    def _make_comment(post_id, **fields):
        body = {"content": "Nice post"}
        body.update(fields)
        response = client.post(f"/api/posts/{post_id}/comments", json=body)
        assert response.status_code == 200, response.text
        return response.json()["comments"][-1]
    return _make_comment
