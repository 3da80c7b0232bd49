"""
FastAPI Router: Authentication, Candidates and Votes API

This module defines the HTTP API endpoints exposed by the backend. It handles:
- User registration and login, each issuing a bearer token
- Resolving the account behind a bearer token
- Candidate listings and per-candidate vote totals
- Vote ingestion
- Candidate update and soft deletion

Each endpoint validates input via Pydantic models and the service-layer
validators, and returns structured JSON responses.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from voting_backend.api.models import (
    CandidatoListing,
    CandidatoUpdate,
    Message,
    NewVote,
    StatusMessage,
    TokenResponse,
    UserCredentials,
    UserData,
    UserOut,
    VotosListing,
)
from voting_backend.database.core.errors import (
    AuthenticationError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from voting_backend.database.core.funcs import (
    delete_candidate,
    get_user_from_token,
    ingest_vote,
    list_candidates,
    list_candidates_with_votes,
    login_user,
    register_user,
    update_candidate,
)
from voting_backend.database.db import get_db

router = APIRouter(prefix="/auth")
"""Creates the FastAPI router in which we define its routes"""

bearer_scheme = HTTPBearer(auto_error=False)


def _status_error(message: str, status_code: int, errors: dict | None = None) -> JSONResponse:
    content = {"status": False, "message": message}
    if errors is not None:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content)


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=TokenResponse)
def register(data: UserData, db: Session = Depends(get_db)):
    """
    Register a new user account.

    Request Body
    ------------
    UserData {name: str, email: str, password: str}

    Returns
    -------
    dict
        {'status': True, 'message': str, 'token': str} with status 201.

    Errors
    ------
    401
        {'status': False, 'message': str, 'errors': {field: [str]}} on invalid fields
        or an email already registered.
    500
        {'status': False, 'message': str} if the database fails.
    """
    try:
        token = register_user(db, name=data.name, email=data.email, password=data.password)
    except ValidationError as e:
        return _status_error(e.message, status.HTTP_401_UNAUTHORIZED, e.errors)
    except PersistenceError as e:
        return _status_error(e.message, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return {"status": True, "message": "User Created Successfully", "token": token}


@router.post("/login", response_model=TokenResponse)
def login(data: UserCredentials, db: Session = Depends(get_db)):
    """
    Authenticate a user and issue a bearer token.

    Request Body
    ------------
    UserCredentials {email: str, password: str}

    Returns
    -------
    dict
        {'status': True, 'message': str, 'token': str}

    Errors
    ------
    401
        Validation errors, or a generic message when the email and password
        do not match a registered account.
    500
        {'status': False, 'message': str} if the database fails.
    """
    try:
        token = login_user(db, email=data.email, password=data.password)
    except ValidationError as e:
        return _status_error(e.message, status.HTTP_401_UNAUTHORIZED, e.errors)
    except AuthenticationError as e:
        return _status_error(e.message, status.HTTP_401_UNAUTHORIZED)
    except PersistenceError as e:
        return _status_error(e.message, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return {"status": True, "message": "User Logged In Successfully", "token": token}


@router.get("/me", response_model=UserOut)
def me(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
):
    """
    Retrieve the account a bearer token was issued for.

    Returns
    -------
    dict
        {'id': int, 'name': str, 'email': str}

    Errors
    ------
    401
        Missing, invalid, expired or unknown token.
    """
    unauthenticated = JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"status": False, "message": "Unauthenticated."},
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None:
        return unauthenticated
    try:
        user = get_user_from_token(db, credentials.credentials)
    except AuthenticationError:
        return unauthenticated
    return {"id": user.id, "name": user.name, "email": user.email}


@router.get("/lista/candidatos", response_model=CandidatoListing)
def candidatos(db: Session = Depends(get_db)):
    """
    List every candidate with its list name and type.

    Returns
    -------
    dict
        {'Listado': [{'nombre': str, 'lista': str, 'tipo': str|None}, ...]}
    """
    return {"Listado": list_candidates(db)}


@router.get("/lista/list", response_model=VotosListing)
def candidatos_votos(db: Session = Depends(get_db)):
    """
    List the vote total of every candidate that received votes.

    Returns
    -------
    dict
        {'Listado': [{'nombre': str, 'total_votos': int}, ...]}
    """
    return {"Listado": list_candidates_with_votes(db)}


@router.post("/lista/ingreso", status_code=status.HTTP_201_CREATED, response_model=StatusMessage)
def ingreso(data: NewVote, db: Session = Depends(get_db)):
    """
    Record a vote total for a candidate.

    Request Body
    ------------
    NewVote {candidato_id: int, total: int}
    """
    ingest_vote(db, candidato_id=data.candidato_id, total=data.total)
    return {"status": True, "message": "Voto ingresado correctamente"}


@router.put("/candidatos/{id}", response_model=Message)
def actualizar_candidato(id: int, data: CandidatoUpdate, db: Session = Depends(get_db)):
    """
    Update the candidate text and type reference of a candidate.

    Request Body
    ------------
    CandidatoUpdate {descripcion: str, candidato_id: int, candidato: str|None, tipocandidato_id: int|None}

    Errors
    ------
    422
        {'message': str, 'errors': {field: [str]}} if a required field is missing.
    404
        {'message': 'Candidato no encontrado'}
    """
    try:
        update_candidate(
            db,
            candidato_id=id,
            descripcion=data.descripcion,
            candidato_ref=data.candidato_id,
            candidato_text=data.candidato,
            tipocandidato_id=data.tipocandidato_id,
        )
    except ValidationError as e:
        return JSONResponse(
            status_code=422,
            content={"message": e.message, "errors": e.errors},
        )
    except NotFoundError as e:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": e.message})
    return {"message": "Candidato actualizado correctamente"}


@router.delete("/candidatos/{id}", response_model=Message)
def eliminar_candidato(id: int, db: Session = Depends(get_db)):
    """
    Soft-delete a candidate together with its type records.

    Errors
    ------
    404
        {'message': 'Candidato no encontrado'} if absent or already deleted.
    """
    try:
        delete_candidate(db, candidato_id=id)
    except NotFoundError as e:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": e.message})
    return {"message": "candidato eliminado correctamente"}
