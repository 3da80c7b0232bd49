from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from voting_backend.database.db import Base


class Candidato(Base):
    """
    A candidate belonging to one `Lista`.

    Candidates are never physically removed: `estado` set to False marks a
    logical deletion.
    """

    __tablename__ = "candidatos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    nombre: Mapped[str] = mapped_column(String(255), nullable=False)
    lista_id: Mapped[int] = mapped_column(ForeignKey("listas.id"), nullable=False)
    tipo: Mapped[str | None] = mapped_column(String(255))
    tipocandidato_id: Mapped[int | None] = mapped_column(Integer)
    descripcion: Mapped[str | None] = mapped_column(Text)
    candidato: Mapped[str | None] = mapped_column(String(255))
    estado: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    lista: Mapped["Lista"] = relationship(back_populates="candidatos")
    tipocandidato: Mapped[list["TipoCandidato"]] = relationship(
        back_populates="candidato", order_by="TipoCandidato.id"
    )

    def __repr__(self) -> str:
        return f"<Candidato(id={self.id}, nombre={self.nombre}, estado={self.estado})>"


class TipoCandidato(Base):
    """Type record owned by a candidate; soft-deleted together with it."""

    __tablename__ = "tipocandidatos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    candidato_id: Mapped[int] = mapped_column(ForeignKey("candidatos.id"), index=True, nullable=False)
    nombre: Mapped[str] = mapped_column(String(255), nullable=False)
    estado: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    candidato: Mapped["Candidato"] = relationship(back_populates="tipocandidato")
