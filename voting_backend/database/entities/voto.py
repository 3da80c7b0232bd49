from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column

from voting_backend.database.db import Base


class Voto(Base):
    """
    A vote count reported for a candidate.

    `candidato_id` is a plain integer column: ingestion accepts any value
    without checking that the candidate exists.
    """

    __tablename__ = "votos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    candidato_id: Mapped[int] = mapped_column(Integer, index=True, nullable=False)
    total: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False
    )
