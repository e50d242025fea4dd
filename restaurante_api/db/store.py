# restaurante_api/db/store.py
from sqlalchemy.ext.asyncio import AsyncEngine

from restaurante_api.core.config import Settings
from restaurante_api.crud import CRUDCardapio, CRUDComanda
from restaurante_api.database import criar_engine, criar_session_factory
from restaurante_api.db import models  # noqa: F401  registra as tabelas em Base.metadata
from restaurante_api.db.base_class import Base


class RestauranteStore:
    """
    Ponto único de acesso ao banco usado pelas rotas.

    Construído explicitamente (no startup da aplicação ou nos testes)
    e injetado via dependência, em vez de um engine global de módulo.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.session_factory = criar_session_factory(engine)
        self.cardapio = CRUDCardapio(self.session_factory)
        self.comandas = CRUDComanda(self.session_factory)

    @classmethod
    def from_settings(cls, settings: Settings) -> "RestauranteStore":
        return cls(criar_engine(settings))

    async def criar_tabelas(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()
