"""
The `api` package defines the backend’s HTTP interface,
along with supporting utilities and data models.

It integrates FastAPI routing and JWT bearer authentication with the
service layer in `database.core`. The package ensures clean
request/response validation and structured error responses.

Contents
--------
- fast_api
    Defines the FastAPI router with endpoints for:
        * User registration and login (both issue a bearer token)
        * Resolving the current user from a bearer token
        * Candidate listing and per-candidate vote totals
        * Vote ingestion
        * Candidate update and soft deletion

- models
    Pydantic schemas for request/response validation:
        * Registration and login payloads, token responses
        * Candidate listings, vote totals and vote ingestion
        * Candidate update payload

- utils
    JWT utilities:
        * `create_access_token` — issues signed JWTs with expiration
        * `verify_token` — validates JWTs and returns their claims
"""
