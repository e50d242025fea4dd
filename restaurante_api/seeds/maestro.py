"""
Maestro do seed: popula o banco com os dados iniciais.

Usa uma única conexão dedicada e uma única transação para todos os
seeders. Se qualquer seeder falhar, a transação inteira é revertida e
nenhum dado parcial fica gravado.

Uso:
    python -m restaurante_api.seeds [--criar-tabelas] [--log-level DEBUG]
"""
import asyncio
import logging
from argparse import ArgumentParser
from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, List, Optional, Sequence, Tuple

from sqlalchemy import Table, func, select
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from restaurante_api.core.config import Settings, get_settings
from restaurante_api.core.logging import setup_logging
from restaurante_api.database import criar_engine
from restaurante_api.db.base_class import Base
from restaurante_api.db.models import Cardapio, Comanda
from restaurante_api.seeds.cardapio_seeder import seed_cardapio
from restaurante_api.seeds.comandas_seeder import seed_comandas

logger = logging.getLogger(__name__)

DICAS = [
    "Banco de dados não está rodando ou não está acessível",
    "Credenciais erradas no arquivo .env",
    "Tabelas não existem (rode `alembic upgrade head` ou use --criar-tabelas)",
    "Permissões insuficientes no banco de dados",
]


class OrdemDeSeedersInvalida(Exception):
    pass


@dataclass(frozen=True)
class Seeder:
    nome: str
    tabela: Table
    executar: Callable[[AsyncConnection], Awaitable[int]]
    depende_de: Tuple[str, ...] = ()


# Ordem explícita de execução. Um seeder novo declara de quem depende
# e precisa ser registrado depois dessas dependências.
SEEDERS: List[Seeder] = [
    Seeder("cardapio", Cardapio.__table__, seed_cardapio),
    Seeder("comandas", Comanda.__table__, seed_comandas, depende_de=("cardapio",)),
]


def validar_ordem(seeders: Sequence[Seeder]) -> None:
    registrados = set()
    for seeder in seeders:
        if seeder.nome in registrados:
            raise OrdemDeSeedersInvalida(f"Seeder '{seeder.nome}' registrado mais de uma vez")
        for dependencia in seeder.depende_de:
            if dependencia not in registrados:
                raise OrdemDeSeedersInvalida(
                    f"Seeder '{seeder.nome}' depende de '{dependencia}', que precisa ser registrado antes"
                )
        registrados.add(seeder.nome)


async def _verificar(conn: AsyncConnection, seeder: Seeder, inseridos: int) -> None:
    total = await conn.scalar(select(func.count()).select_from(seeder.tabela))
    if total != inseridos:
        logger.warning("Tabela %s: esperado %d, encontrado %d", seeder.tabela.name, inseridos, total)


async def executar_seed(
    engine: AsyncEngine,
    seeders: Sequence[Seeder] = SEEDERS,
    *,
    criar_tabelas: bool = False,
) -> Dict[str, int]:
    """
    Executa os seeders em ordem, numa única transação.
    Retorna o número de registros inseridos por seeder.
    """
    validar_ordem(seeders)
    resultado: Dict[str, int] = {}

    async with engine.connect() as conn:
        logger.info("Conexão dedicada adquirida")
        trans = await conn.begin()
        try:
            if criar_tabelas:
                await conn.run_sync(Base.metadata.create_all)
            for seeder in seeders:
                inseridos = await seeder.executar(conn)
                await _verificar(conn, seeder, inseridos)
                resultado[seeder.nome] = inseridos
        except Exception:
            await trans.rollback()
            logger.error("ROLLBACK: nenhuma alteração deste seed foi mantida")
            raise
        await trans.commit()
        logger.info("COMMIT: transação confirmada")

    logger.info("Conexão liberada")
    return resultado


def codigo_do_erro(erro: BaseException) -> Optional[str]:
    """Código específico do banco (SQLSTATE, errno do MySQL), se houver."""
    origem = getattr(erro, "orig", None) or erro
    for atributo in ("sqlstate", "pgcode", "errno"):
        codigo = getattr(origem, atributo, None)
        if codigo:
            return str(codigo)
    args = getattr(origem, "args", ())
    if args and isinstance(args[0], int) and not isinstance(args[0], bool):
        return str(args[0])
    return None


def _reportar_erro(erro: BaseException) -> None:
    logger.error("ERRO ao popular banco de dados")
    logger.error("Mensagem: %s", erro)
    codigo = codigo_do_erro(erro)
    if codigo:
        logger.error("Código do erro: %s", codigo)
    logger.error("Possíveis causas:\n%s", "\n".join(f"  {i}. {d}" for i, d in enumerate(DICAS, 1)))


async def _rodar(settings: Settings, criar_tabelas: bool) -> Dict[str, int]:
    engine = criar_engine(settings)
    try:
        return await executar_seed(engine, criar_tabelas=criar_tabelas)
    finally:
        await engine.dispose()
        logger.info("Pool de conexões encerrado")


def parse_args(argv: Optional[Sequence[str]] = None):
    parser = ArgumentParser(description="Popula o banco com o cardápio e comandas de exemplo.")
    parser.add_argument(
        "--criar-tabelas",
        action="store_true",
        help="Cria as tabelas que não existirem antes do seed (na mesma transação)",
    )
    parser.add_argument("--log-level", default=None, help="Nível de log (padrão: LOG_LEVEL)")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None, settings: Optional[Settings] = None) -> int:
    args = parse_args(argv)
    settings = settings or get_settings()
    setup_logging(args.log_level or settings.LOG_LEVEL)

    ausentes = settings.configuracoes_banco_ausentes()
    if ausentes:
        logger.error("Configuração do banco incompleta. Defina as variáveis: %s", ", ".join(ausentes))
        return 1

    logger.info("Iniciando o seed do banco de dados...")
    try:
        resultado = asyncio.run(_rodar(settings, args.criar_tabelas))
    except Exception as erro:
        _reportar_erro(erro)
        return 1

    for nome, total in resultado.items():
        logger.info("%s: %d registros", nome, total)
    logger.info("Seed concluído com sucesso!")
    return 0
