# restaurante_api/schemas/validacao.py
from decimal import Decimal, InvalidOperation
from typing import Annotated, Any

from pydantic import PlainSerializer

# Valores monetários saem como número no JSON, não como string
Dinheiro = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

# Limites das colunas: INTEGER (32 bits) e NUMERIC(10, 2)
INTEIRO_MAX = 2_147_483_647
DINHEIRO_MAX = Decimal("99999999.99")


def ausente(valor: Any) -> bool:
    """Campo obrigatório não informado (None, vazio, False ou zero)."""
    if valor is None or valor is False:
        return True
    if isinstance(valor, str):
        return not valor.strip()
    if isinstance(valor, (int, float, Decimal)):
        return valor == 0
    return False


def para_decimal(valor: Any, mensagem: str) -> Decimal:
    if isinstance(valor, bool):
        raise ValueError(mensagem)
    try:
        numero = Decimal(str(valor).strip())
    except InvalidOperation:
        raise ValueError(mensagem) from None
    if not numero.is_finite():
        raise ValueError(mensagem)
    return numero


def para_inteiro_positivo(valor: Any, mensagem: str) -> int:
    numero = para_decimal(valor, mensagem)
    if numero <= 0 or numero > INTEIRO_MAX or numero != numero.to_integral_value():
        raise ValueError(mensagem)
    return int(numero)
