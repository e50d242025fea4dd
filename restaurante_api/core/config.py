# restaurante_api/core/config.py
from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # Ignora variáveis extras não declaradas
    )

    # Configurações básicas do projeto
    PROJECT_NAME: str = "API Restaurante"
    PROJECT_VERSION: str = "1.0.0"
    API_STR: str = "/api"
    ENVIRONMENT: str = "development"

    # Configurações de banco de dados
    # DATABASE_URL completa tem prioridade sobre as variáveis DB_*
    DATABASE_URL: Optional[str] = None
    DB_DRIVER: str = "postgresql+asyncpg"
    DB_HOST: Optional[str] = None
    DB_PORT: Optional[int] = None
    DB_USER: Optional[str] = None
    DB_PASSWORD: Optional[str] = None
    DB_DATABASE: Optional[str] = None
    DB_SSL: bool = False
    DB_POOL_SIZE: int = Field(10, ge=1)
    DB_POOL_TIMEOUT: float = Field(30.0, gt=0)

    # Servidor HTTP
    HOST: str = "0.0.0.0"
    PORT: int = 4000
    BACKEND_CORS_ORIGINS: List[str] = ["*"]

    # Configurações opcionais
    REDIS_URL: Optional[str] = None
    REDIS_TIMEOUT: float = Field(1.0, gt=0)  # segundos, conexão e operações
    REDIS_RETRY_INTERVAL: float = Field(30.0, ge=0)  # espera após falha de conexão
    LOG_LEVEL: str = "INFO"

    @property
    def database_url(self) -> URL:
        if self.DATABASE_URL:
            return make_url(self.DATABASE_URL)
        return URL.create(
            drivername=self.DB_DRIVER,
            username=self.DB_USER,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_DATABASE,
        )

    def configuracoes_banco_ausentes(self) -> List[str]:
        """Nomes das variáveis de conexão obrigatórias que não foram definidas."""
        if self.DATABASE_URL:
            return []
        obrigatorias = {
            "DB_HOST": self.DB_HOST,
            "DB_USER": self.DB_USER,
            "DB_PASSWORD": self.DB_PASSWORD,
            "DB_DATABASE": self.DB_DATABASE,
        }
        return [nome for nome, valor in obrigatorias.items() if not valor]


@lru_cache
def get_settings() -> Settings:
    return Settings()
