import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from restaurante_api.api.errors import register_exception_handlers
from restaurante_api.api.router import api_router
from restaurante_api.core.config import Settings, get_settings
from restaurante_api.db.store import RestauranteStore
from restaurante_api.services.redis_service import RedisService

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[RestauranteStore] = None,
    eventos: Optional[RedisService] = None,
) -> FastAPI:
    """
    Monta a aplicação. `store` e `eventos` podem ser injetados (testes);
    caso contrário são criados no startup a partir das configurações.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store_proprio = store is None
        app.state.store = store or RestauranteStore.from_settings(settings)
        app.state.eventos = eventos or RedisService.from_settings(settings)
        # Conecta uma vez no startup; sem Redis a API segue sem publicar eventos
        await app.state.eventos.connect()

        # Opcional: Criar tabelas automaticamente (em desenvolvimento)
        # Em produção, use migrações com Alembic
        if store_proprio and settings.ENVIRONMENT == "development":
            await app.state.store.criar_tabelas()
            logger.info("Tabelas criadas com sucesso (apenas em desenvolvimento)")

        yield

        await app.state.eventos.disconnect()
        if store_proprio:
            await app.state.store.dispose()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="API de restaurante - cardápio e comandas",
        openapi_url=f"{settings.API_STR}/openapi.json",
        version=settings.PROJECT_VERSION,
        lifespan=lifespan,
    )

    # Configuração de CORS
    if settings.BACKEND_CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)
    app.include_router(api_router, prefix=settings.API_STR)

    @app.get("/", tags=["Root"])
    async def read_root():
        return {
            "mensagem": f"Bem-vindo à {settings.PROJECT_NAME} v{settings.PROJECT_VERSION}",
            "cardapio": f"{settings.API_STR}/cardapio",
            "comandas": f"{settings.API_STR}/comandas",
            "docs": "/docs",
            "environment": settings.ENVIRONMENT,
        }

    @app.get("/health", tags=["Health Check"])
    async def health_check():
        """Endpoint para verificação de saúde da API"""
        return {
            "status": "healthy",
            "environment": settings.ENVIRONMENT,
        }

    return app


app = create_app()
