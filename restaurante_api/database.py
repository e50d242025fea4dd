# restaurante_api/database.py
import json
import ssl
from decimal import Decimal
from typing import Any, Dict

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from restaurante_api.core.config import Settings


def _json_default(valor: Any) -> Any:
    # Itens da comanda chegam com Decimal vindo dos schemas
    if isinstance(valor, Decimal):
        return float(valor)
    raise TypeError(f"Objeto do tipo {type(valor).__name__} não é serializável em JSON")


def json_serializer(valor: Any) -> str:
    return json.dumps(valor, default=_json_default, ensure_ascii=False)


def criar_engine(settings: Settings) -> AsyncEngine:
    """
    Cria o motor assíncrono (pool de conexões) a partir das configurações.

    O pool limita o número de conexões abertas; requisições excedentes
    aguardam até DB_POOL_TIMEOUT em vez de falhar.
    """
    url = settings.database_url
    kwargs: Dict[str, Any] = {
        "echo": False,
        "json_serializer": json_serializer,
    }

    if url.get_backend_name() != "sqlite":
        kwargs.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=0,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            pool_pre_ping=True,
        )

    if settings.DB_SSL:
        contexto = ssl.create_default_context()
        contexto.minimum_version = ssl.TLSVersion.TLSv1_2
        kwargs["connect_args"] = {"ssl": contexto}

    return create_async_engine(url, **kwargs)


def criar_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    # Cria uma fábrica de sessões assíncronas
    return async_sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )
