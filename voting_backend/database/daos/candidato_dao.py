from sqlalchemy import select
from sqlalchemy.orm import Session

from voting_backend.database.entities import Candidato, Lista


class CandidatoDao:
    """Read and mutation operations on `Candidato` and its type records."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, candidato_id: int) -> Candidato | None:
        return self.db.get(Candidato, candidato_id)

    def list_with_lista(self) -> list[dict]:
        """Every candidate joined to its list, active or not, by candidate id."""
        stmt = (
            select(Candidato.nombre, Lista.nombre.label("lista"), Candidato.tipo)
            .join(Lista, Candidato.lista_id == Lista.id)
            .order_by(Candidato.id)
        )
        return [dict(row._mapping) for row in self.db.execute(stmt)]

    def update_fields(self, candidato: Candidato, candidato_text: str | None, tipocandidato_id: int | None) -> Candidato:
        candidato.candidato = candidato_text
        candidato.tipocandidato_id = tipocandidato_id
        self.db.add(candidato)
        return candidato

    def soft_delete(self, candidato: Candidato) -> int:
        """
        Flag the candidate and every one of its type records inactive.

        Returns
        -------
        int
            Number of type records deactivated.
        """
        affected = 0
        for tipo in candidato.tipocandidato:
            tipo.estado = False
            affected += 1
        candidato.estado = False
        self.db.add(candidato)
        return affected
