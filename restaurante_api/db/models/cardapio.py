# restaurante_api/db/models/cardapio.py
from sqlalchemy import Column, Numeric, String, Text

from restaurante_api.db.base_class import Base


class Cardapio(Base):
    # id herdado da Base, tabela "cardapio"
    nome = Column(String(255), nullable=False)
    preco = Column(Numeric(10, 2), nullable=False)
    descricao = Column(Text, nullable=True)
