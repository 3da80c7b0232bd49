"""
The `entities` package defines the ORM models of the application,
representing the database tables as Python classes via SQLAlchemy.

These entity classes are the foundation of the persistence layer,
used by DAOs (`daos` package) to perform CRUD operations.

Contents
--------
- User
    Represents a registered account.
    * Stores name, unique email and hashed password

- PersonalAccessToken
    Issuance record of a bearer token.
    * Stores the token `jti` and the owning user id

- Lista
    Represents an electoral list that candidates belong to.

- Candidato
    Represents a candidate.
    * Stores name, list, type reference, description and `estado` flag
    * Owns its `TipoCandidato` records

- TipoCandidato
    Type record of a candidate, carrying its own `estado` flag.

- Voto
    A vote total reported for a candidate id.
"""

from voting_backend.database.entities.user import User
from voting_backend.database.entities.personal_access_token import PersonalAccessToken
from voting_backend.database.entities.lista import Lista
from voting_backend.database.entities.candidato import Candidato, TipoCandidato
from voting_backend.database.entities.voto import Voto

__all__ = ["User", "PersonalAccessToken", "Lista", "Candidato", "TipoCandidato", "Voto"]
