"""Voting management backend: registration, login, candidates and votes."""

__version__ = "1.0.0"
