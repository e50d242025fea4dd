from .cardapio import Cardapio
from .comanda import STATUS_VALIDOS, Comanda, StatusComanda
