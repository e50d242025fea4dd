from .cardapio import CARDAPIO
from .comandas import COMANDAS
