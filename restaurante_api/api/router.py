from fastapi import APIRouter

from restaurante_api.api.endpoints import cardapio, comandas
from restaurante_api.schemas import RespostaErro

# Formato documentado das respostas de erro (mesmo envelope das rotas)
ERROS = {
    400: {"model": RespostaErro, "description": "Requisição inválida"},
    404: {"model": RespostaErro, "description": "Registro não encontrado"},
    500: {"model": RespostaErro, "description": "Erro ao acessar o banco de dados"},
}

api_router = APIRouter(responses=ERROS)

api_router.include_router(cardapio.router, prefix="/cardapio", tags=["Cardápio"])
api_router.include_router(comandas.router, prefix="/comandas", tags=["Comandas"])
