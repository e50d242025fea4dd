# restaurante_api/schemas/cardapio.py
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from restaurante_api.schemas.validacao import DINHEIRO_MAX, Dinheiro, ausente, para_decimal

MSG_OBRIGATORIOS = "Nome e preço são obrigatórios"
MSG_PRECO = "Preço deve ser um número positivo"


class CardapioBase(BaseModel):
    nome: str = Field(..., examples=["Suco de Laranja"])
    preco: Decimal = Field(..., examples=[8.00])
    descricao: Optional[str] = Field(None, examples=["Suco natural 500ml"])

    @model_validator(mode="before")
    @classmethod
    def verificar_obrigatorios(cls, data: Any) -> Any:
        if isinstance(data, dict) and (ausente(data.get("nome")) or ausente(data.get("preco"))):
            raise ValueError(MSG_OBRIGATORIOS)
        return data

    @field_validator("nome")
    @classmethod
    def limpar_nome(cls, v: str) -> str:
        return v.strip()

    @field_validator("preco", mode="before")
    @classmethod
    def preco_positivo(cls, v: Any) -> Decimal:
        preco = para_decimal(v, MSG_PRECO)
        if preco <= 0 or preco > DINHEIRO_MAX:
            raise ValueError(MSG_PRECO)
        return preco

    @field_validator("descricao", mode="before")
    @classmethod
    def descricao_vazia_como_nula(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


class CardapioCreate(CardapioBase):
    pass


class CardapioUpdate(CardapioBase):
    # PUT substitui todos os campos: nome e preço continuam obrigatórios
    pass


class CardapioItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nome: str
    preco: Dinheiro
    descricao: Optional[str] = None
