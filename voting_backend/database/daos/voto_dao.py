from sqlalchemy import func, select
from sqlalchemy.orm import Session

from voting_backend.database.entities import Candidato, Voto


class VotoDao:
    """Vote ingestion and aggregation."""

    def __init__(self, db: Session):
        self.db = db

    def create_voto(self, candidato_id: int, total: int) -> Voto:
        voto = Voto(candidato_id=candidato_id, total=total)
        self.db.add(voto)
        self.db.flush()
        return voto

    def totals_by_candidate(self) -> list[dict]:
        """
        Sum of `total` per candidate.

        Inner join: candidates without any vote are left out.
        """
        stmt = (
            select(Candidato.nombre, func.sum(Voto.total).label("total_votos"))
            .join(Voto, Candidato.id == Voto.candidato_id)
            .group_by(Candidato.id, Candidato.nombre)
            .order_by(Candidato.id)
        )
        return [{"nombre": row.nombre, "total_votos": int(row.total_votos)} for row in self.db.execute(stmt)]
