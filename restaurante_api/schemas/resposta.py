# restaurante_api/schemas/resposta.py
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Resposta(BaseModel, Generic[T]):
    """
    Envelope padrão das respostas da API.
    As rotas usam response_model_exclude_unset, então campos não
    informados (mensagem, dados) não aparecem no JSON.
    """
    sucesso: bool
    mensagem: Optional[str] = None
    dados: Optional[T] = None


class RespostaErro(BaseModel):
    sucesso: bool = False
    mensagem: str
