from .crud_cardapio import CRUDCardapio
from .crud_comanda import CRUDComanda
