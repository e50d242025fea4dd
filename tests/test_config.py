"""
Testes das configurações (variáveis de ambiente e URL do banco).
"""

from restaurante_api.core.config import Settings


def test_url_montada_a_partir_das_variaveis():
    settings = Settings(
        _env_file=None,
        DATABASE_URL=None,
        DB_HOST="db.local",
        DB_PORT=5432,
        DB_USER="garcom",
        DB_PASSWORD="s3nh@",
        DB_DATABASE="restaurante",
    )

    url = settings.database_url

    assert url.drivername == "postgresql+asyncpg"
    assert url.host == "db.local"
    assert url.port == 5432
    assert url.username == "garcom"
    # caracteres especiais na senha não quebram a URL
    assert url.password == "s3nh@"
    assert url.database == "restaurante"
    assert settings.configuracoes_banco_ausentes() == []


def test_database_url_tem_prioridade():
    settings = Settings(_env_file=None, DATABASE_URL="mysql+aiomysql://u:p@mysql/restaurante", DB_HOST="outro")

    assert settings.database_url.get_backend_name() == "mysql"
    assert settings.database_url.host == "mysql"
    assert settings.configuracoes_banco_ausentes() == []


def test_variaveis_ausentes():
    settings = Settings(
        _env_file=None,
        DATABASE_URL=None,
        DB_HOST=None,
        DB_USER="garcom",
        DB_PASSWORD=None,
        DB_DATABASE="restaurante",
    )

    assert settings.configuracoes_banco_ausentes() == ["DB_HOST", "DB_PASSWORD"]


def test_lidas_do_ambiente(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("DB_POOL_SIZE", "3")
    monkeypatch.setenv("ENVIRONMENT", "production")

    settings = Settings(_env_file=None)

    assert settings.PORT == 8080
    assert settings.DB_POOL_SIZE == 3
    assert settings.ENVIRONMENT == "production"


def test_valores_padrao(monkeypatch):
    for nome in ("PORT", "API_STR", "DB_POOL_SIZE", "LOG_LEVEL"):
        monkeypatch.delenv(nome, raising=False)

    settings = Settings(_env_file=None)

    assert settings.PORT == 4000
    assert settings.API_STR == "/api"
    assert settings.DB_POOL_SIZE == 10
    assert settings.LOG_LEVEL == "INFO"
