from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from integration.api.deps import get_db
from integration.core.config import settings
from integration.db.base import Base, Family, Member, User, Gender
from integration.main import app

SITE_PASSWORD = "s3cret"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory, monkeypatch):
    monkeypatch.setattr(settings, "SITE_PASSWORD", SITE_PASSWORD)

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    # not used as a context manager: startup would create tables on the real database
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def logged_in(client):
    resp = client.post("/auth/login", data={"password": SITE_PASSWORD})
    assert resp.status_code == 200
    return client


@pytest.fixture
def make_leader(db):
    def _make(first_name="Jean", last_name="Dupont", phone="06 12 34 56 78", email="jean@example.com", gender="male"):
        leader = User(first_name=first_name, last_name=last_name, phone=phone, email=email, gender=gender)
        db.add(leader)
        db.commit()
        db.refresh(leader)
        return leader
    return _make


@pytest.fixture
def make_family(db):
    def _make(name="Famille Capitole", latitude=None, longitude=None, pilote=None, copilote=None, address="1 place du Capitole, Toulouse"):
        fam = Family(
            name=name,
            address=address,
            latitude=latitude,
            longitude=longitude,
            pilote_id=pilote.id if pilote else None,
            copilote_id=copilote.id if copilote else None,
        )
        db.add(fam)
        db.commit()
        db.refresh(fam)
        return fam
    return _make


@pytest.fixture
def make_member(db):
    def _make(first_name="Marie", last_name="Curie", latitude=None, longitude=None, **extra):
        fields = dict(
            email=f"{first_name.lower()}@example.com",
            phone="0700000000",
            gender=Gender.FEMALE,
            date_of_birth=date(2008, 5, 17),
            address="10 rue de Metz, Toulouse",
        )
        fields.update(extra)
        m = Member(first_name=first_name, last_name=last_name, latitude=latitude, longitude=longitude, **fields)
        db.add(m)
        db.commit()
        db.refresh(m)
        return m
    return _make
