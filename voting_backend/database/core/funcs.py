"""
Service layer of the voting backend.

Every function receives the request-scoped `Session`, validates its input,
performs its persistence work through the DAOs and owns the transaction:
it commits on success and rolls back before raising `PersistenceError`.
"""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from voting_backend.api.utils import create_access_token, new_token_id, verify_token
from voting_backend.database.core.errors import (
    AuthenticationError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from voting_backend.database.core.security import verify_password
from voting_backend.database.core.validation import (
    EMAIL_TAKEN,
    REGISTRATION_FAILED,
    validate_candidate_update,
    validate_login,
    validate_registration,
)
from voting_backend.database.daos import CandidatoDao, TokenDao, UserDao, VotoDao
from voting_backend.database.entities import User

logger = logging.getLogger(__name__)

CREDENTIALS_MISMATCH = "Email & Password does not match with our record."
CANDIDATE_NOT_FOUND = "Candidato no encontrado"


def _fail(db: Session, e: SQLAlchemyError, action: str) -> PersistenceError:
    db.rollback()
    logger.exception("Database failure while trying to %s", action)
    # the DBAPI message only; the wrapped statement carries bound parameters
    return PersistenceError(str(getattr(e, "orig", None) or e.__class__.__name__))


def issue_token(db: Session, user: User) -> str:
    """
    Mint a bearer token bound to `user` and record its issuance.

    The caller commits the session.
    """
    jti = new_token_id()
    TokenDao(db).create_token(user_id=user.id, jti=jti)
    return create_access_token({"sub": str(user.id), "jti": jti})


def register_user(db: Session, name, email, password) -> str:
    """
    Create an account and return its first bearer token.

    Raises
    ------
    ValidationError
        If any field is missing or malformed, or the email is already registered.
    PersistenceError
        If the store fails; nothing is persisted in that case.
    """
    users = UserDao(db)
    try:
        validate_registration(name, email, password, email_taken=users.email_exists)
        try:
            user = users.create_user(name=name, email=email, password=password)
        except IntegrityError:
            # lost a race on the unique email index
            db.rollback()
            raise ValidationError(REGISTRATION_FAILED, {"email": [EMAIL_TAKEN]})
        token = issue_token(db, user)
        db.commit()
    except SQLAlchemyError as e:
        raise _fail(db, e, "register a user")
    logger.info("Registered user id=%s", user.id)
    return token


def authenticate(db: Session, email: str, password: str) -> User:
    """
    Verify an email/password pair.

    Returns
    -------
    User
        The matching account.

    Raises
    ------
    AuthenticationError
        With the same message whether the email is unknown or the password wrong.
    """
    user = UserDao(db).get_by_email(email)
    if not verify_password(password, user.password if user else None):
        raise AuthenticationError(CREDENTIALS_MISMATCH)
    return user


def login_user(db: Session, email, password) -> str:
    """Validate credentials and return a fresh bearer token."""
    validate_login(email, password)
    try:
        user = authenticate(db, email, password)
        token = issue_token(db, user)
        db.commit()
    except AuthenticationError:
        logger.info("Failed login attempt")
        raise
    except SQLAlchemyError as e:
        raise _fail(db, e, "log a user in")
    logger.info("User id=%s logged in", user.id)
    return token


def get_user_from_token(db: Session, token: str) -> User:
    """
    Resolve the account a bearer token was issued for.

    Raises
    ------
    AuthenticationError
        If the token is malformed, expired, or has no issuance record.
    """
    claims = verify_token(token)
    if claims is None:
        raise AuthenticationError("Unauthenticated.")
    try:
        record = TokenDao(db).get_by_jti(claims["jti"])
    except SQLAlchemyError as e:
        raise _fail(db, e, "resolve a bearer token")
    if record is None or str(record.user_id) != str(claims["sub"]):
        raise AuthenticationError("Unauthenticated.")
    return record.user


def list_candidates(db: Session) -> list[dict]:
    """Every candidate with its list name and type, in id order."""
    try:
        return CandidatoDao(db).list_with_lista()
    except SQLAlchemyError as e:
        raise _fail(db, e, "list candidates")


def list_candidates_with_votes(db: Session) -> list[dict]:
    """Vote totals of every candidate that received at least one vote."""
    try:
        return VotoDao(db).totals_by_candidate()
    except SQLAlchemyError as e:
        raise _fail(db, e, "aggregate votes")


def ingest_vote(db: Session, candidato_id: int, total: int) -> None:
    try:
        VotoDao(db).create_voto(candidato_id=candidato_id, total=total)
        db.commit()
    except SQLAlchemyError as e:
        raise _fail(db, e, "ingest a vote")
    logger.info("Ingested %s votes for candidato_id=%s", total, candidato_id)


def update_candidate(db: Session, candidato_id: int, descripcion, candidato_ref, candidato_text, tipocandidato_id) -> None:
    """
    Overwrite the candidate text and type reference of a candidate.

    `descripcion` and `candidato_ref` (the `candidato_id` body field) are
    required but only validated.

    Raises
    ------
    ValidationError
        Before any lookup, if a required field is missing.
    NotFoundError
        If no candidate has id `candidato_id`.
    """
    validate_candidate_update(descripcion, candidato_ref, candidato_text, tipocandidato_id)
    dao = CandidatoDao(db)
    try:
        candidato = dao.get_by_id(candidato_id)
        if candidato is None:
            raise NotFoundError(CANDIDATE_NOT_FOUND)
        dao.update_fields(candidato, candidato_text=candidato_text, tipocandidato_id=tipocandidato_id)
        db.commit()
    except SQLAlchemyError as e:
        raise _fail(db, e, "update a candidate")
    logger.info("Updated candidato id=%s", candidato_id)


def delete_candidate(db: Session, candidato_id: int) -> None:
    """
    Soft-delete a candidate and its type records in one transaction.

    Raises
    ------
    NotFoundError
        If the candidate does not exist or is already inactive.
    """
    dao = CandidatoDao(db)
    try:
        candidato = dao.get_by_id(candidato_id)
        if candidato is None or not candidato.estado:
            raise NotFoundError(CANDIDATE_NOT_FOUND)
        affected = dao.soft_delete(candidato)
        db.commit()
    except SQLAlchemyError as e:
        raise _fail(db, e, "delete a candidate")
    logger.info("Soft-deleted candidato id=%s and %s type records", candidato_id, affected)
