import asyncio
import json
import logging
import time
from typing import Any, Dict, Optional

import redis.asyncio as redis  # Using asyncio version for FastAPI
from redis.exceptions import RedisError

from restaurante_api.core.config import Settings

logger = logging.getLogger(__name__)

CANAL_COMANDAS = "comandas_eventos"


class RedisService:
    """
    Publica eventos das comandas (ex.: painel da cozinha).

    Sem REDIS_URL o serviço fica desativado e `publish_message` não faz nada.
    Falhas do Redis são registradas em log e nunca quebram a requisição:
    cada operação tem timeout curto e, depois de uma falha, novas tentativas
    de conexão só acontecem após `intervalo_retentativa` segundos.
    """

    def __init__(self, url: Optional[str] = None, timeout: float = 1.0, intervalo_retentativa: float = 30.0):
        self.url = url
        self.timeout = timeout
        self.intervalo_retentativa = intervalo_retentativa
        self._client: Optional[redis.Redis] = None
        self._lock = asyncio.Lock()
        self._proxima_tentativa = 0.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "RedisService":
        return cls(settings.REDIS_URL, settings.REDIS_TIMEOUT, settings.REDIS_RETRY_INTERVAL)

    @property
    def ativo(self) -> bool:
        return bool(self.url)

    async def connect(self) -> Optional[redis.Redis]:
        if not self.ativo:
            return None
        if self._client:
            return self._client
        async with self._lock:
            # Outra requisição pode ter conectado enquanto esta esperava
            if self._client or time.monotonic() < self._proxima_tentativa:
                return self._client
            client = redis.Redis.from_url(
                self.url,
                decode_responses=True,
                socket_connect_timeout=self.timeout,
                socket_timeout=self.timeout,
            )
            try:
                await client.ping()
            except (RedisError, OSError) as e:
                logger.warning("Falha ao conectar ao Redis: %s", e)
                await self._descartar(client)
                return None
            self._client = client
            logger.info("Conectado ao Redis em %s", self.url)
        return self._client

    async def _descartar(self, client: redis.Redis) -> None:
        self._proxima_tentativa = time.monotonic() + self.intervalo_retentativa
        try:
            await client.aclose()
        except (RedisError, OSError):
            logger.debug("Erro ao fechar conexão com o Redis", exc_info=True)

    async def disconnect(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("Desconectado do Redis.")

    async def publish_message(self, channel: str, message: str) -> bool:
        r = await self.connect()
        if not r:
            return False
        try:
            await r.publish(channel, message)
        except (RedisError, OSError) as e:
            logger.warning("Não foi possível publicar no canal %s: %s", channel, e)
            if self._client is r:
                self._client = None
                await self._descartar(r)
            return False
        logger.debug("Mensagem publicada no canal %s", channel)
        return True

    async def publicar_evento_comanda(self, evento: str, dados: Dict[str, Any]) -> bool:
        mensagem = json.dumps({"evento": evento, **dados}, default=str, ensure_ascii=False)
        return await self.publish_message(CANAL_COMANDAS, mensagem)
