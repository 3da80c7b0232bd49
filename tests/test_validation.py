import pytest

from voting_backend.database.core.errors import ValidationError
from voting_backend.database.core.validation import (
    validate_candidate_update,
    validate_login,
    validate_registration,
)


def never_taken(email):
    return False


def test_valid_registration_passes():
    validate_registration("Jane", "jane@example.com", "pw", email_taken=never_taken)


def test_uniqueness_probe_skipped_for_malformed_email():
    calls = []

    def probe(email):
        calls.append(email)
        return False

    with pytest.raises(ValidationError):
        validate_registration("Jane", "jane@", "pw", email_taken=probe)

    assert calls == []


def test_taken_email_is_reported():
    with pytest.raises(ValidationError) as excinfo:
        validate_registration("Jane", "jane@example.com", "pw", email_taken=lambda email: True)

    assert excinfo.value.errors == {"email": ["The email has already been taken."]}
    assert excinfo.value.message == "Existen campos vacios"


def test_login_requires_both_fields():
    with pytest.raises(ValidationError) as excinfo:
        validate_login(None, None)

    assert excinfo.value.errors == {
        "email": ["The email field is required."],
        "password": ["The password field is required."],
    }


def test_candidate_update_requires_string_descripcion():
    with pytest.raises(ValidationError) as excinfo:
        validate_candidate_update(123, 1)

    assert excinfo.value.errors == {"descripcion": ["The descripcion must be a string."]}


def test_tipocandidato_id_rejects_booleans():
    with pytest.raises(ValidationError) as excinfo:
        validate_candidate_update("desc", 1, None, True)

    assert excinfo.value.errors == {"tipocandidato_id": ["The tipocandidato_id must be an integer."]}
