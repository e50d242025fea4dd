# restaurante_api/core/logging.py
import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

logger = logging.getLogger("restaurante_api")


def setup_logging(level: str = "INFO") -> None:
    """Configuração básica de logging para a API e para o script de seed."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logger.setLevel(level.upper())
