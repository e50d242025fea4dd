"""
Testes do seed: seeders, maestro transacional e CLI.
"""

from functools import partial
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from restaurante_api.core.config import Settings
from restaurante_api.db.models import Cardapio, Comanda
from restaurante_api.db.store import RestauranteStore
from restaurante_api.seeds import maestro
from restaurante_api.seeds.cardapio_seeder import seed_cardapio
from restaurante_api.seeds.comandas_seeder import seed_comandas
from restaurante_api.seeds.maestro import (
    SEEDERS,
    OrdemDeSeedersInvalida,
    Seeder,
    codigo_do_erro,
    executar_seed,
    validar_ordem,
)
from restaurante_api.seeds.mocks import CARDAPIO, COMANDAS

COMANDA_INVALIDA = {"mesa": 1, "status": "invalido", "itens": [], "total": 0}


async def contar(engine, tabela):
    async with engine.connect() as conn:
        return await conn.scalar(select(func.count()).select_from(tabela))


def seeders_com_falha():
    return [
        SEEDERS[0],
        Seeder(
            "comandas",
            Comanda.__table__,
            partial(seed_comandas, dados=[COMANDA_INVALIDA]),
            depende_de=("cardapio",),
        ),
    ]


# ============================================================================
# Maestro
# ============================================================================


async def test_seed_completo(engine):
    resultado = await executar_seed(engine, criar_tabelas=True)

    assert resultado == {"cardapio": len(CARDAPIO), "comandas": len(COMANDAS)}
    assert await contar(engine, Cardapio.__table__) == 6
    assert await contar(engine, Comanda.__table__) == 3


async def test_seed_visivel_pelo_store(engine):
    await executar_seed(engine, criar_tabelas=True)
    store = RestauranteStore(engine)

    itens = await store.cardapio.get_multi()
    comandas_mesa_5 = await store.comandas.get_multi_by_mesa(mesa=5)

    assert [item.id for item in itens] == [1, 2, 3, 4, 5, 6]
    assert itens[0].nome == "Prato Feito"
    assert len(comandas_mesa_5) == 1
    assert comandas_mesa_5[0].status == "pendente"
    assert [i["id"] for i in comandas_mesa_5[0].itens] == [1, 2]


async def test_seed_repetido_substitui_dados(engine):
    await executar_seed(engine, criar_tabelas=True)
    await executar_seed(engine)

    assert await contar(engine, Cardapio.__table__) == 6
    assert await contar(engine, Comanda.__table__) == 3
    ids = [item.id for item in await RestauranteStore(engine).cardapio.get_multi()]
    assert ids == [1, 2, 3, 4, 5, 6]


async def test_falha_reverte_tudo(engine):
    await executar_seed(engine, criar_tabelas=True)

    with pytest.raises(ValueError):
        await executar_seed(engine, seeders_com_falha())

    # O cardápio foi limpo e repopulado dentro da transação revertida:
    # o estado anterior continua intacto
    assert await contar(engine, Cardapio.__table__) == 6
    assert await contar(engine, Comanda.__table__) == 3


async def test_falha_em_banco_vazio_nao_deixa_dados_parciais(engine):
    await RestauranteStore(engine).criar_tabelas()

    with pytest.raises(ValueError):
        await executar_seed(engine, seeders_com_falha())

    assert await contar(engine, Cardapio.__table__) == 0
    assert await contar(engine, Comanda.__table__) == 0


async def test_verificacao_avisa_divergencia(engine, caplog):
    async def seeder_mentiroso(conn):
        return 99

    await RestauranteStore(engine).criar_tabelas()

    await executar_seed(engine, [Seeder("cardapio", Cardapio.__table__, seeder_mentiroso)])

    assert "esperado 99, encontrado 0" in caplog.text


# ============================================================================
# Ordem dos seeders
# ============================================================================


def test_ordem_registrada_e_valida():
    validar_ordem(SEEDERS)


def test_dependencia_registrada_depois():
    with pytest.raises(OrdemDeSeedersInvalida):
        validar_ordem(list(reversed(SEEDERS)))


def test_dependencia_desconhecida():
    seeder = Seeder("comandas", Comanda.__table__, seed_comandas, depende_de=("mesas",))

    with pytest.raises(OrdemDeSeedersInvalida):
        validar_ordem([seeder])


def test_seeder_duplicado():
    with pytest.raises(OrdemDeSeedersInvalida):
        validar_ordem([SEEDERS[0], SEEDERS[0]])


# ============================================================================
# Código do erro
# ============================================================================


class ErroPostgres(Exception):
    sqlstate = "42P01"


def test_codigo_sqlstate():
    erro = OperationalError("SELECT 1", {}, ErroPostgres('relation "cardapio" does not exist'))

    assert codigo_do_erro(erro) == "42P01"


def test_codigo_errno_mysql():
    erro = OperationalError("SELECT 1", {}, Exception(1146, "Table 'restaurante.cardapio' doesn't exist"))

    assert codigo_do_erro(erro) == "1146"


def test_sem_codigo():
    assert codigo_do_erro(ValueError("Status inválido")) is None


# ============================================================================
# CLI
# ============================================================================


def test_main_sem_configuracao(monkeypatch, caplog):
    criar_engine = MagicMock()
    monkeypatch.setattr(maestro, "criar_engine", criar_engine)
    settings = Settings(
        _env_file=None,
        DATABASE_URL=None,
        DB_HOST="localhost",
        DB_USER=None,
        DB_PASSWORD=None,
        DB_DATABASE=None,
    )

    assert maestro.main([], settings=settings) == 1
    assert "DB_USER, DB_PASSWORD, DB_DATABASE" in caplog.text
    criar_engine.assert_not_called()


def test_main_sucesso(settings):
    assert maestro.main(["--criar-tabelas"], settings=settings) == 0


def test_main_falha_de_conexao(tmp_path, caplog):
    settings = Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'nao' / 'existe' / 'restaurante.db'}",
    )

    assert maestro.main(["--log-level", "debug"], settings=settings) == 1
    assert "ERRO ao popular banco de dados" in caplog.text
    assert "Possíveis causas" in caplog.text


# ============================================================================
# IDs do seed por banco
# ============================================================================


def conexao_falsa(dialeto):
    conn = MagicMock()
    conn.dialect.name = dialeto
    conn.execute = AsyncMock()
    return conn


def valores_inseridos(conn):
    # Os INSERTs recebem (statement, valores); a limpeza só o statement
    return [chamada.args[1] for chamada in conn.execute.await_args_list if len(chamada.args) > 1]


async def test_mysql_grava_ids_explicitos():
    conn = conexao_falsa("mysql")

    await seed_cardapio(conn)
    await seed_comandas(conn)

    cardapio = valores_inseridos(conn)[: len(CARDAPIO)]
    comandas = valores_inseridos(conn)[len(CARDAPIO) :]
    assert [v["id"] for v in cardapio] == [1, 2, 3, 4, 5, 6]
    assert [v["id"] for v in comandas] == [1, 2, 3]


async def test_postgresql_deixa_ids_para_a_sequencia():
    conn = conexao_falsa("postgresql")

    await seed_cardapio(conn)

    assert len(valores_inseridos(conn)) == len(CARDAPIO)
    assert all("id" not in v for v in valores_inseridos(conn))


async def test_reseed_apos_novos_itens_volta_aos_ids_do_exemplo(engine):
    await executar_seed(engine, criar_tabelas=True)
    store = RestauranteStore(engine)
    async with engine.begin() as conn:
        await conn.execute(Cardapio.__table__.insert(), {"id": 40, "nome": "Extra", "preco": 1})

    await executar_seed(engine)

    assert [item.id for item in await store.cardapio.get_multi()] == [1, 2, 3, 4, 5, 6]
    comanda_mesa_5 = (await store.comandas.get_multi_by_mesa(mesa=5))[0]
    nomes = {item.id: item.nome for item in await store.cardapio.get_multi()}
    assert [nomes[i["id"]] for i in comanda_mesa_5.itens] == ["Prato Feito", "Suco de Laranja"]
