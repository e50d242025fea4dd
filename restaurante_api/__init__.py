"""API de restaurante: cardápio, comandas e seed do banco."""

__version__ = "1.0.0"
