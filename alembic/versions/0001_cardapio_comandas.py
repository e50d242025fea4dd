"""Migração inicial: cardápio e comandas."""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = "0001_cardapio_comandas"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "cardapio",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("nome", sa.String(255), nullable=False),
        sa.Column("preco", sa.Numeric(10, 2), nullable=False),
        sa.Column("descricao", sa.Text, nullable=True),
    )

    op.create_table(
        "comandas",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("mesa", sa.Integer, nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="pendente"),
        sa.Column("itens", sa.JSON().with_variant(postgresql.JSONB(), "postgresql"), nullable=False),
        sa.Column("total", sa.Numeric(10, 2), nullable=False),
        sa.Column("criado_em", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("atualizado_em", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint(
            "status IN ('pendente', 'em_preparo', 'pronto', 'entregue', 'cancelado')",
            name="ck_comandas_status",
        ),
    )
    op.create_index("ix_comandas_mesa", "comandas", ["mesa"])


def downgrade() -> None:
    op.drop_index("ix_comandas_mesa", table_name="comandas")
    op.drop_table("comandas")
    op.drop_table("cardapio")
