from datetime import timedelta

from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from voting_backend.api.utils import create_access_token, new_token_id
from voting_backend.database.daos import TokenDao, UserDao
from voting_backend.database.entities import PersonalAccessToken, User


def _user_count(session_factory):
    with session_factory() as session:
        return session.scalar(select(func.count()).select_from(User))


def _me(client, token):
    return client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})


def test_register_returns_token_accepted_by_me(client, register):
    response = register()

    assert response.status_code == 201
    body = response.json()
    assert body["status"] is True
    assert body["message"] == "User Created Successfully"
    assert body["token"]

    me = _me(client, body["token"])
    assert me.status_code == 200
    assert me.json()["email"] == "jane@example.com"
    assert me.json()["name"] == "Jane Doe"


def test_register_stores_hashed_password_and_one_token(register, session_factory):
    register(password="plain-text")

    with session_factory() as session:
        user = UserDao(session).get_by_email("jane@example.com")
        assert user.password != "plain-text"
        tokens = session.scalar(
            select(func.count()).select_from(PersonalAccessToken).where(PersonalAccessToken.user_id == user.id)
        )
        assert tokens == 1


def test_register_duplicate_email_is_rejected(register, session_factory):
    assert register().status_code == 201

    response = register(name="Other")

    assert response.status_code == 401
    body = response.json()
    assert body["status"] is False
    assert body["message"] == "Existen campos vacios"
    assert body["errors"] == {"email": ["The email has already been taken."]}
    assert _user_count(session_factory) == 1


def test_register_reports_every_missing_field(client, session_factory):
    response = client.post("/api/auth/register", json={})

    assert response.status_code == 401
    errors = response.json()["errors"]
    assert set(errors) == {"name", "email", "password"}
    assert errors["name"] == ["The name field is required."]
    assert _user_count(session_factory) == 0


def test_register_rejects_malformed_email(register):
    response = register(email="not-an-email", password="")

    assert response.status_code == 401
    errors = response.json()["errors"]
    assert errors["email"] == ["The email must be a valid email address."]
    assert errors["password"] == ["The password field is required."]


def test_register_database_failure_is_500(register, session_factory, monkeypatch):
    def broken_create(self, name, email, password):
        params = (name, email, "$argon2id$v=19$m=65536,t=3,p=4$c2FsdA$aGFzaA")
        raise OperationalError("INSERT INTO users (name, email, password)", params, Exception("database is locked"))

    monkeypatch.setattr(UserDao, "create_user", broken_create)

    response = register()

    assert response.status_code == 500
    body = response.json()
    assert body["status"] is False
    assert body["message"] == "database is locked"
    assert "$argon2" not in response.text
    assert "jane@example.com" not in response.text
    assert _user_count(session_factory) == 0


def test_login_issues_fresh_token(client, register):
    first = register().json()["token"]

    response = client.post("/api/auth/login", json={"email": "jane@example.com", "password": "s3cret-pass"})

    assert response.status_code == 200
    body = response.json()
    assert body["status"] is True
    assert body["message"] == "User Logged In Successfully"
    assert body["token"] != first
    assert _me(client, body["token"]).status_code == 200
    assert _me(client, first).status_code == 200


def test_login_unknown_email_and_wrong_password_look_the_same(client, register):
    register()

    unknown = client.post("/api/auth/login", json={"email": "nobody@example.com", "password": "s3cret-pass"})
    wrong = client.post("/api/auth/login", json={"email": "jane@example.com", "password": "nope"})

    assert unknown.status_code == wrong.status_code == 401
    assert unknown.json() == wrong.json()
    assert unknown.json() == {
        "status": False,
        "message": "Email & Password does not match with our record.",
    }


def test_login_validation_errors(client):
    response = client.post("/api/auth/login", json={"email": "bad"})

    assert response.status_code == 401
    body = response.json()
    assert body["message"] == "validation error"
    assert set(body["errors"]) == {"email", "password"}


def test_me_requires_bearer_token(client):
    response = client.get("/api/auth/me")

    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"
    assert response.json()["message"] == "Unauthenticated."


def test_me_rejects_garbage_token(client):
    assert _me(client, "not.a.jwt").status_code == 401


def test_me_rejects_token_without_issuance_record(client, register, session_factory):
    register()
    with session_factory() as session:
        user = UserDao(session).get_by_email("jane@example.com")
    forged = create_access_token({"sub": str(user.id), "jti": new_token_id()})

    assert _me(client, forged).status_code == 401


def test_me_rejects_expired_token(client, register, session_factory):
    register()
    with session_factory() as session:
        user = UserDao(session).get_by_email("jane@example.com")
        jti = new_token_id()
        TokenDao(session).create_token(user_id=user.id, jti=jti)
        session.commit()
    expired = create_access_token({"sub": str(user.id), "jti": jti}, expires_delta=timedelta(minutes=-1))

    assert _me(client, expired).status_code == 401


def test_duplicate_email_caught_by_unique_index(register, session_factory, monkeypatch):
    assert register().status_code == 201
    monkeypatch.setattr(UserDao, "email_exists", lambda self, email: False)

    response = register(name="Other")

    assert response.status_code == 401
    body = response.json()
    assert body["status"] is False
    assert body["errors"] == {"email": ["The email has already been taken."]}
    assert "$argon2" not in response.text
    assert _user_count(session_factory) == 1


def test_register_reports_mistyped_and_missing_fields_together(client, session_factory):
    response = client.post("/api/auth/register", json={"name": 123, "password": 5})

    assert response.status_code == 401
    body = response.json()
    assert body["status"] is False
    assert body["errors"] == {
        "name": ["The name must be a string."],
        "email": ["The email field is required."],
        "password": ["The password must be a string."],
    }
    assert _user_count(session_factory) == 0


def test_login_with_non_string_fields_is_a_validation_error(client):
    response = client.post("/api/auth/login", json={"email": ["a@example.com"], "password": 1})

    assert response.status_code == 401
    body = response.json()
    assert body["message"] == "validation error"
    assert body["errors"]["email"] == ["The email must be a string."]
    assert body["errors"]["password"] == ["The password must be a string."]


def test_me_database_failure_is_structured_500(client, register, monkeypatch):
    token = register().json()["token"]

    def broken_lookup(self, jti):
        raise OperationalError("SELECT personal_access_tokens", (jti,), Exception("database is locked"))

    monkeypatch.setattr(TokenDao, "get_by_jti", broken_lookup)

    response = _me(client, token)

    assert response.status_code == 500
    assert response.json() == {"status": False, "message": "database is locked"}
