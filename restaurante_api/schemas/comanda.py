# restaurante_api/schemas/comanda.py
import json
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from restaurante_api.db.models.comanda import STATUS_VALIDOS, StatusComanda
from restaurante_api.schemas.validacao import (
    DINHEIRO_MAX,
    Dinheiro,
    ausente,
    para_decimal,
    para_inteiro_positivo,
)

MSG_OBRIGATORIOS = "Mesa, itens e total são obrigatórios"
MSG_ITENS = "Itens deve ser um array não vazio"
MSG_TOTAL = "Total deve ser um número não negativo"
MSG_MESA = "Mesa deve ser um número positivo"
MSG_STATUS = f"Status inválido. Use: {', '.join(STATUS_VALIDOS)}"


def normalizar_itens(valor: Any) -> List[Dict[str, Any]]:
    """
    Converte o campo `itens` para lista de dicts.

    Dependendo do driver, a coluna JSON chega já decodificada (list)
    ou como texto/bytes JSON. Todo caminho de leitura passa por aqui.
    """
    if valor is None:
        return []
    if isinstance(valor, (bytes, bytearray)):
        valor = valor.decode("utf-8")
    if isinstance(valor, str):
        valor = json.loads(valor) if valor.strip() else []
    if not isinstance(valor, list):
        raise ValueError("Itens armazenados em formato inesperado")
    return valor


def completar_subtotal(item: Dict[str, Any]) -> Dict[str, Any]:
    """
    Preenche `subtotal` (quantidade x preco_unitario) quando o cliente não
    o enviou e os dois valores são numéricos. O restante do item é
    gravado como veio.
    """
    if item.get("subtotal") is not None or "preco_unitario" not in item:
        return item
    try:
        preco = para_decimal(item["preco_unitario"], "")
        quantidade = para_decimal(item.get("quantidade", 1), "")
        subtotal = preco * quantidade
    except (ValueError, ArithmeticError):
        return item
    if abs(subtotal) > DINHEIRO_MAX:
        return item
    return {**item, "subtotal": float(subtotal)}


class ComandaCreate(BaseModel):
    mesa: int = Field(..., examples=[5])
    # Snapshot livre dos itens: {id, nome, quantidade, preco_unitario, subtotal?}
    itens: List[Dict[str, Any]]
    total: Decimal = Field(..., examples=[42.00])

    @model_validator(mode="before")
    @classmethod
    def verificar_campos(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        mesa, itens, total = data.get("mesa"), data.get("itens"), data.get("total")
        # TODO: mesa 0 e total 0 são rejeitados como ausentes; confirmar regra com o negócio
        if ausente(mesa) or itens is None or ausente(total):
            raise ValueError(MSG_OBRIGATORIOS)
        if not isinstance(itens, list) or not itens:
            raise ValueError(MSG_ITENS)
        total_decimal = para_decimal(total, MSG_TOTAL)
        if total_decimal < 0 or total_decimal > DINHEIRO_MAX:
            raise ValueError(MSG_TOTAL)
        return {**data, "mesa": para_inteiro_positivo(mesa, MSG_MESA)}

    @field_validator("itens")
    @classmethod
    def calcular_subtotais(cls, v: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return [completar_subtotal(item) for item in v]


class ComandaStatusUpdate(BaseModel):
    status: StatusComanda = Field(..., examples=[StatusComanda.EM_PREPARO])

    @model_validator(mode="before")
    @classmethod
    def verificar_status(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("status") not in STATUS_VALIDOS:
            raise ValueError(MSG_STATUS)
        return data


class Comanda(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    mesa: int
    status: StatusComanda
    itens: List[Dict[str, Any]]
    total: Dinheiro
    criado_em: datetime
    atualizado_em: datetime

    @field_validator("itens", mode="before")
    @classmethod
    def desserializar_itens(cls, v: Any) -> List[Dict[str, Any]]:
        return normalizar_itens(v)
