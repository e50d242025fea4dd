# restaurante_api/schemas/__init__.py
from .cardapio import CardapioCreate, CardapioItem, CardapioUpdate
from .comanda import Comanda, ComandaCreate, ComandaStatusUpdate, completar_subtotal, normalizar_itens
from .resposta import Resposta, RespostaErro
