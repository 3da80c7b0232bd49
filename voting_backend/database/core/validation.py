"""
Field validation for incoming payloads.

Request schemas accept any JSON value, so type problems are reported here
alongside missing fields, in the `field -> [messages]` shape clients
already consume.
"""

from email_validator import EmailNotValidError, validate_email

from voting_backend.database.core.errors import ValidationError

REGISTRATION_FAILED = "Existen campos vacios"
EMAIL_TAKEN = "The email has already been taken."


def _blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class FieldErrors:
    """Accumulates messages per field."""

    def __init__(self):
        self.errors: dict[str, list[str]] = {}

    def add(self, field: str, message: str) -> None:
        self.errors.setdefault(field, []).append(message)

    def required(self, field: str, value) -> bool:
        """Record a missing value. Returns True when the value is present."""
        if _blank(value):
            self.add(field, f"The {field} field is required.")
            return False
        return True

    def string(self, field: str, value) -> bool:
        if not isinstance(value, str):
            self.add(field, f"The {field} must be a string.")
            return False
        return True

    def integer(self, field: str, value) -> bool:
        # bool is an int subclass but never a valid id
        if isinstance(value, bool) or not isinstance(value, int):
            self.add(field, f"The {field} must be an integer.")
            return False
        return True

    def email(self, field: str, value: str) -> bool:
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            self.add(field, f"The {field} must be a valid email address.")
            return False
        return True

    def required_string(self, field: str, value) -> bool:
        return self.required(field, value) and self.string(field, value)

    def raise_if_any(self, message: str) -> None:
        if self.errors:
            raise ValidationError(message, self.errors)


def validate_registration(name, email, password, email_taken) -> None:
    """
    Validate a registration payload.

    Parameters
    ----------
    name, email, password
        Raw JSON values from the request, possibly None or of any type.
    email_taken : Callable[[str], bool]
        Uniqueness probe, only called for a syntactically valid email.

    Raises
    ------
    ValidationError
        Listing every failing field.
    """
    checks = FieldErrors()
    checks.required_string("name", name)
    if checks.required_string("email", email) and checks.email("email", email):
        if email_taken(email):
            checks.add("email", EMAIL_TAKEN)
    checks.required_string("password", password)
    checks.raise_if_any(REGISTRATION_FAILED)


def validate_login(email, password) -> None:
    checks = FieldErrors()
    if checks.required_string("email", email):
        checks.email("email", email)
    checks.required_string("password", password)
    checks.raise_if_any("validation error")


def validate_candidate_update(descripcion, candidato_id, candidato=None, tipocandidato_id=None) -> None:
    """`descripcion` and `candidato_id` are required; the other two may be null."""
    checks = FieldErrors()
    checks.required_string("descripcion", descripcion)
    checks.required("candidato_id", candidato_id)
    if candidato is not None:
        checks.string("candidato", candidato)
    if tipocandidato_id is not None:
        checks.integer("tipocandidato_id", tipocandidato_id)
    checks.raise_if_any("Los datos proporcionados no son validos.")
