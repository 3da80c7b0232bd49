from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from voting_backend.database.db import Base


class Lista(Base):
    """Electoral list grouping candidates. Read-only for the API."""

    __tablename__ = "listas"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    nombre: Mapped[str] = mapped_column(String(255), nullable=False)

    candidatos: Mapped[list["Candidato"]] = relationship(back_populates="lista")
