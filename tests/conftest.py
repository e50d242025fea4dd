"""
Configuração e fixtures compartilhadas dos testes.

Os testes usam um arquivo SQLite temporário (aiosqlite) por teste, então
não dependem de PostgreSQL nem de Redis rodando.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from restaurante_api.core.config import Settings
from restaurante_api.database import criar_engine
from restaurante_api.main import create_app


@pytest.fixture
def settings(tmp_path):
    """Configurações isoladas do ambiente e do arquivo .env."""
    return Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'restaurante.db'}",
        ENVIRONMENT="development",
        REDIS_URL=None,
    )


@pytest.fixture
def eventos():
    """Publicador de eventos falso, para verificar as chamadas das rotas."""
    mock = MagicMock()
    mock.publicar_evento_comanda = AsyncMock(return_value=True)
    mock.connect = AsyncMock(return_value=None)
    mock.disconnect = AsyncMock()
    return mock


@pytest.fixture
def client(settings, eventos):
    """TestClient com lifespan ativo (tabelas criadas no startup)."""
    app = create_app(settings=settings, eventos=eventos)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
async def engine(settings):
    engine = criar_engine(settings)
    yield engine
    await engine.dispose()


@pytest.fixture
def item_valido():
    return {"nome": "Suco", "preco": 8.00}


@pytest.fixture
def comanda_valida():
    return {
        "mesa": 5,
        "itens": [
            {"id": 1, "nome": "Prato Feito", "quantidade": 2, "preco_unitario": 13.00, "subtotal": 26.00},
            {"id": 2, "nome": "Suco de Laranja", "quantidade": 2, "preco_unitario": 8.00},
        ],
        "total": 42.00,
    }
