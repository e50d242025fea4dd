# restaurante_api/db/models/comanda.py
import enum
from datetime import datetime, timezone

from sqlalchemy import JSON, CheckConstraint, Column, DateTime, Integer, Numeric, String
from sqlalchemy.dialects.postgresql import JSONB

from restaurante_api.db.base_class import Base


class StatusComanda(str, enum.Enum):
    PENDENTE = "pendente"
    EM_PREPARO = "em_preparo"
    PRONTO = "pronto"
    ENTREGUE = "entregue"
    CANCELADO = "cancelado"


STATUS_VALIDOS = [s.value for s in StatusComanda]


def agora() -> datetime:
    return datetime.now(timezone.utc)


class Comanda(Base):
    __tablename__ = "comandas"
    __table_args__ = (
        CheckConstraint(
            "status IN ({})".format(", ".join(f"'{s}'" for s in STATUS_VALIDOS)),
            name="ck_comandas_status",
        ),
    )

    mesa = Column(Integer, nullable=False, index=True)
    status = Column(String(20), nullable=False, default=StatusComanda.PENDENTE.value)
    # Snapshot desnormalizado dos itens: [{id, nome, quantidade, preco_unitario, subtotal}]
    itens = Column(JSON().with_variant(JSONB(), "postgresql"), nullable=False)
    total = Column(Numeric(10, 2), nullable=False)
    criado_em = Column(DateTime(timezone=True), nullable=False, default=agora)
    atualizado_em = Column(DateTime(timezone=True), nullable=False, default=agora)
