"""
Seeder das comandas.

Deve rodar depois do seeder do cardápio: os itens referenciam IDs do
cardápio recém-inserido na mesma transação.
"""
import logging
from typing import Any, Dict, Sequence

from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncConnection

from restaurante_api.db.models.comanda import Comanda, StatusComanda
from restaurante_api.seeds.limpeza import limpar_tabela, usa_ids_explicitos
from restaurante_api.seeds.mocks import COMANDAS

logger = logging.getLogger(__name__)


async def seed_comandas(conn: AsyncConnection, dados: Sequence[Dict[str, Any]] = COMANDAS) -> int:
    tabela = Comanda.__table__
    logger.info("Populando tabela: %s", tabela.name)
    await limpar_tabela(conn, tabela)
    ids_explicitos = usa_ids_explicitos(conn)

    for posicao, comanda in enumerate(dados, start=1):
        valores = {
            "mesa": comanda["mesa"],
            "status": StatusComanda(comanda["status"]).value,
            "itens": list(comanda["itens"]),
            "total": comanda["total"],
        }
        if ids_explicitos:
            valores["id"] = posicao
        await conn.execute(insert(tabela), valores)

    logger.info("%d comandas inseridas", len(dados))
    return len(dados)
