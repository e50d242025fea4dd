import logging

from sqlalchemy import Table, delete, text
from sqlalchemy.ext.asyncio import AsyncConnection

logger = logging.getLogger(__name__)


def usa_ids_explicitos(conn: AsyncConnection) -> bool:
    """
    Se os seeders devem gravar os IDs (1, 2, 3...) em vez de deixar o banco gerar.

    Só o PostgreSQL reinicia a sequência na limpeza. No MySQL o AUTO_INCREMENT
    continua de onde parou, e as comandas de exemplo apontam para os IDs 1 a 6
    do cardápio. IDs explícitos numa tabela vazia avançam o contador no MySQL
    e o rowid no SQLite.
    """
    return conn.dialect.name != "postgresql"


async def limpar_tabela(conn: AsyncConnection, tabela: Table) -> None:
    """
    Remove todas as linhas da tabela dentro da transação corrente.

    - PostgreSQL: TRUNCATE ... RESTART IDENTITY CASCADE (IDs voltam para 1).
    - MySQL/MariaDB: DELETE. TRUNCATE faria commit implícito e quebraria a
      atomicidade do seed; o AUTO_INCREMENT não é reiniciado, por isso os
      seeders gravam IDs explícitos (ver `usa_ids_explicitos`).
    - SQLite e demais: DELETE.
    """
    if conn.dialect.name == "postgresql":
        nome = conn.dialect.identifier_preparer.format_table(tabela)
        await conn.execute(text(f"TRUNCATE TABLE {nome} RESTART IDENTITY CASCADE"))
    else:
        await conn.execute(delete(tabela))
    logger.info("Tabela %s limpa", tabela.name)
