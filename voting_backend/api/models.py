"""
Pydantic schemas for request and response bodies.

Request fields accept any JSON value at the schema level so the
service-layer validators can report every missing or mistyped field in
one response.
"""

from typing import Any

from pydantic import BaseModel


class UserData(BaseModel):
    name: Any = None
    email: Any = None
    password: Any = None


class UserCredentials(BaseModel):
    email: Any = None
    password: Any = None


class TokenResponse(BaseModel):
    status: bool
    message: str
    token: str


class StatusMessage(BaseModel):
    status: bool
    message: str


class UserOut(BaseModel):
    id: int
    name: str
    email: str


class CandidatoListItem(BaseModel):
    nombre: str
    lista: str
    tipo: str | None = None


class CandidatoVotos(BaseModel):
    nombre: str
    total_votos: int


class CandidatoListing(BaseModel):
    Listado: list[CandidatoListItem]


class VotosListing(BaseModel):
    Listado: list[CandidatoVotos]


class NewVote(BaseModel):
    candidato_id: int
    total: int


class CandidatoUpdate(BaseModel):
    descripcion: Any = None
    candidato_id: Any = None
    candidato: Any = None
    tipocandidato_id: Any = None


class Message(BaseModel):
    message: str
