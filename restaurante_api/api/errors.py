# restaurante_api/api/errors.py
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Sequence

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from restaurante_api.schemas.resposta import RespostaErro

logger = logging.getLogger(__name__)

# Mensagens para parâmetros de rota que não são inteiros positivos
MENSAGENS_PARAMETRO = {
    "item_id": "ID inválido. Deve ser um número positivo.",
    "comanda_id": "ID inválido. Deve ser um número positivo.",
    "numero_mesa": "Número da mesa inválido",
}


@contextmanager
def tratar_erro_banco(mensagem: str) -> Iterator[None]:
    """
    Converte falhas de banco/conexão em HTTP 500 com mensagem genérica.
    O detalhe do erro vai apenas para o log do servidor.
    """
    try:
        yield
    except (SQLAlchemyError, OSError):
        logger.exception(mensagem)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=mensagem)


def mensagem_de_validacao(erros: Sequence[Dict[str, Any]]) -> str:
    if not erros:
        return "Requisição inválida"

    for erro in erros:
        loc = tuple(erro.get("loc", ()))
        if len(loc) > 1 and loc[0] == "path" and loc[1] in MENSAGENS_PARAMETRO:
            return MENSAGENS_PARAMETRO[loc[1]]

    erro = erros[0]
    loc = tuple(erro.get("loc", ()))
    ctx = erro.get("ctx") or {}
    if "error" in ctx:
        return str(ctx["error"])

    if erro.get("type") == "json_invalid":
        return "JSON inválido no corpo da requisição"
    if erro.get("type") == "missing" and loc == ("body",):
        return "Corpo da requisição é obrigatório"
    if len(loc) >= 3 and loc[:2] == ("body", "itens") and isinstance(loc[2], int):
        if len(loc) == 3:
            return f"Item {loc[2] + 1} da comanda inválido"
        return f"Item {loc[2] + 1} da comanda inválido: campo '{loc[3]}'"
    if len(loc) > 1:
        return f"Campo '{loc[-1]}' inválido"
    return "Requisição inválida"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=RespostaErro(mensagem=str(exc.detail)).model_dump(),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    erros: List[Dict[str, Any]] = list(exc.errors())
    mensagem = mensagem_de_validacao(erros)
    logger.info("Requisição rejeitada em %s %s: %s", request.method, request.url.path, mensagem)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=RespostaErro(mensagem=mensagem).model_dump(),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Erro inesperado em %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=RespostaErro(mensagem="Erro interno do servidor").model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
