"""
The `daos` package provides the Data Access Layer for the application.

It is responsible for all interactions with the database entities,
encapsulating CRUD operations that support the core functionality
of the system. Each DAO operates on a specific entity and abstracts
away the direct SQLAlchemy queries, offering a cleaner API to the
service layer. DAOs never commit: the service layer owns the transaction.

Contents
--------
- UserDao
    Handles user persistence:
    * Creates users with password hashing
    * Fetches users by email or id
    * Checks email uniqueness

- TokenDao
    Manages bearer token issuance records:
    * Records each issued token `jti`
    * Fetches issuance records by `jti`

- CandidatoDao
    Manages candidates:
    * Lists candidates joined to their list
    * Updates the candidate text and type reference
    * Soft-deletes a candidate together with its type records

- VotoDao
    Manages votes:
    * Records ingested vote totals
    * Sums vote totals per candidate
"""

from voting_backend.database.daos.user_dao import UserDao
from voting_backend.database.daos.token_dao import TokenDao
from voting_backend.database.daos.candidato_dao import CandidatoDao
from voting_backend.database.daos.voto_dao import VotoDao

__all__ = ["UserDao", "TokenDao", "CandidatoDao", "VotoDao"]
