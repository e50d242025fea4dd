"""
Testes do publicador de eventos das comandas.
"""

import asyncio
import json
from unittest.mock import AsyncMock, patch

from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

from restaurante_api.services.redis_service import CANAL_COMANDAS, RedisService


async def test_desativado_sem_url():
    service = RedisService(None)

    assert service.ativo is False
    assert await service.publicar_evento_comanda("comanda_criada", {"comanda_id": 1}) is False


async def test_publica_evento_no_canal_das_comandas():
    service = RedisService("redis://localhost:6379/0")
    cliente = AsyncMock()
    service._client = cliente

    publicado = await service.publicar_evento_comanda("status_atualizado", {"comanda_id": 7, "status": "pronto"})

    assert publicado is True
    canal, mensagem = cliente.publish.await_args.args
    assert canal == CANAL_COMANDAS
    assert json.loads(mensagem) == {"evento": "status_atualizado", "comanda_id": 7, "status": "pronto"}


async def test_falha_na_publicacao_nao_propaga():
    service = RedisService("redis://localhost:6379/0")
    cliente = AsyncMock()
    cliente.publish.side_effect = RedisConnectionError("conexão recusada")
    service._client = cliente

    assert await service.publish_message(CANAL_COMANDAS, "{}") is False


async def test_falha_na_conexao_desativa_publicacao():
    cliente = AsyncMock()
    cliente.ping.side_effect = RedisConnectionError("conexão recusada")

    with patch("restaurante_api.services.redis_service.redis.Redis.from_url", return_value=cliente):
        service = RedisService("redis://localhost:6379/0")
        assert await service.connect() is None
        assert await service.publish_message(CANAL_COMANDAS, "{}") is False
    cliente.aclose.assert_awaited_once()


async def test_conexao_usa_timeouts_curtos():
    cliente = AsyncMock()

    with patch("restaurante_api.services.redis_service.redis.Redis.from_url", return_value=cliente) as from_url:
        service = RedisService("redis://localhost:6379/0", timeout=0.5)
        assert await service.connect() is cliente

    assert from_url.call_args.kwargs["socket_connect_timeout"] == 0.5
    assert from_url.call_args.kwargs["socket_timeout"] == 0.5


async def test_nao_tenta_reconectar_antes_do_intervalo():
    cliente = AsyncMock()
    cliente.ping.side_effect = RedisTimeoutError("sem resposta")

    with patch("restaurante_api.services.redis_service.redis.Redis.from_url", return_value=cliente) as from_url:
        service = RedisService("redis://localhost:6379/0", intervalo_retentativa=60)
        for _ in range(5):
            assert await service.publicar_evento_comanda("comanda_criada", {"comanda_id": 1}) is False

    assert from_url.call_count == 1


async def test_reconecta_depois_do_intervalo():
    cliente = AsyncMock()
    cliente.ping.side_effect = [RedisConnectionError("conexão recusada"), True]

    with patch("restaurante_api.services.redis_service.redis.Redis.from_url", return_value=cliente) as from_url:
        service = RedisService("redis://localhost:6379/0", intervalo_retentativa=0)
        assert await service.connect() is None
        assert await service.connect() is cliente

    assert from_url.call_count == 2


async def test_conexoes_simultaneas_criam_um_unico_cliente():
    cliente = AsyncMock()

    with patch("restaurante_api.services.redis_service.redis.Redis.from_url", return_value=cliente) as from_url:
        service = RedisService("redis://localhost:6379/0")
        resultados = await asyncio.gather(*(service.connect() for _ in range(10)))

    assert from_url.call_count == 1
    assert all(r is cliente for r in resultados)


async def test_falha_na_publicacao_descarta_cliente():
    service = RedisService("redis://localhost:6379/0", intervalo_retentativa=60)
    cliente = AsyncMock()
    cliente.publish.side_effect = RedisTimeoutError("sem resposta")
    service._client = cliente

    assert await service.publish_message(CANAL_COMANDAS, "{}") is False
    assert service._client is None
    cliente.aclose.assert_awaited_once()
    # Dentro do intervalo não há nova tentativa de conexão
    assert await service.connect() is None


async def test_disconnect_fecha_cliente():
    service = RedisService("redis://localhost:6379/0")
    cliente = AsyncMock()
    service._client = cliente

    await service.disconnect()

    cliente.aclose.assert_awaited_once()
    assert service._client is None
