from sqlalchemy import select
from sqlalchemy.orm import Session

from voting_backend.database.entities import PersonalAccessToken


class TokenDao:
    """Persistence operations on bearer token issuance records."""

    def __init__(self, db: Session):
        self.db = db

    def create_token(self, user_id: int, jti: str, name: str = "API TOKEN") -> PersonalAccessToken:
        record = PersonalAccessToken(user_id=user_id, jti=jti, name=name)
        self.db.add(record)
        self.db.flush()
        return record

    def get_by_jti(self, jti: str) -> PersonalAccessToken | None:
        return self.db.scalar(select(PersonalAccessToken).where(PersonalAccessToken.jti == jti))

