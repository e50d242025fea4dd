"""
Seeder do cardápio.

Recebe a conexão já dentro da transação aberta pelo maestro: não faz
commit nem rollback, e qualquer erro sobe para quem chamou.
"""
import logging
from typing import Any, Dict, Sequence

from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncConnection

from restaurante_api.db.models.cardapio import Cardapio
from restaurante_api.seeds.limpeza import limpar_tabela, usa_ids_explicitos
from restaurante_api.seeds.mocks import CARDAPIO

logger = logging.getLogger(__name__)


async def seed_cardapio(conn: AsyncConnection, dados: Sequence[Dict[str, Any]] = CARDAPIO) -> int:
    tabela = Cardapio.__table__
    logger.info("Populando tabela: %s", tabela.name)
    await limpar_tabela(conn, tabela)
    ids_explicitos = usa_ids_explicitos(conn)

    for posicao, item in enumerate(dados, start=1):
        valores = {"nome": item["nome"], "preco": item["preco"], "descricao": item.get("descricao")}
        if ids_explicitos:
            valores["id"] = posicao
        await conn.execute(insert(tabela), valores)
        logger.debug("Item adicionado: %s | R$ %.2f", item["nome"], item["preco"])

    logger.info("%d itens inseridos no cardápio", len(dados))
    return len(dados)
