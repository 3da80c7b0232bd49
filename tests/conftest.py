import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-for-voting-backend")
os.environ.setdefault("DB_DRIVER_NAME", "sqlite")
os.environ.setdefault("DB_DATABASE_NAME", ":memory:")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from voting_backend.database.db import Base, get_db, init_db
from voting_backend.database.entities import Candidato, Lista, TipoCandidato, Voto
from voting_backend.main import create_app


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        hide_parameters=True,
    )
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def client(session_factory):
    app = create_app(init_database=False)

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def seeded(session_factory):
    """Two lists, three candidates, type records for the first one and ten votes for it."""
    with session_factory() as session:
        lista_a = Lista(nombre="Lista A")
        lista_b = Lista(nombre="Lista B")
        session.add_all([lista_a, lista_b])
        session.flush()

        ana = Candidato(nombre="Ana", lista_id=lista_a.id, tipo="Presidente", descripcion="Candidata A")
        luis = Candidato(nombre="Luis", lista_id=lista_a.id, tipo="Vicepresidente", descripcion="Candidato B")
        marta = Candidato(nombre="Marta", lista_id=lista_b.id, tipo="Vocal", descripcion="Candidata C")
        session.add_all([ana, luis, marta])
        session.flush()

        session.add_all(
            [
                TipoCandidato(candidato_id=ana.id, nombre="Titular"),
                TipoCandidato(candidato_id=ana.id, nombre="Suplente"),
                TipoCandidato(candidato_id=luis.id, nombre="Titular"),
            ]
        )
        session.add_all([Voto(candidato_id=ana.id, total=4), Voto(candidato_id=ana.id, total=6)])
        session.add(Voto(candidato_id=marta.id, total=3))
        session.commit()
        ids = {"ana": ana.id, "luis": luis.id, "marta": marta.id, "lista_a": lista_a.id}
    return ids


@pytest.fixture()
def register(client):
    """Helper posting a registration payload."""

    def _register(name="Jane Doe", email="jane@example.com", password="s3cret-pass"):
        return client.post(
            "/api/auth/register",
            json={"name": name, "email": email, "password": password},
        )

    return _register
