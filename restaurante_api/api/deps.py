# restaurante_api/api/deps.py
from fastapi import Request

from restaurante_api.db.store import RestauranteStore
from restaurante_api.services.redis_service import RedisService


def get_store(request: Request) -> RestauranteStore:
    return request.app.state.store


def get_eventos(request: Request) -> RedisService:
    return request.app.state.eventos
