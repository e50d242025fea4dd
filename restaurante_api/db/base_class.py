from sqlalchemy import Column, Integer
from sqlalchemy.orm import as_declarative, declared_attr


@as_declarative()
class Base:
    """
    Base declarativa: nome da tabela derivado da classe
    e chave primária inteira comum a todos os modelos.
    """

    @declared_attr
    def __tablename__(cls) -> str:
        return cls.__name__.lower()  # Ex: Cardapio -> cardapio

    # id inteiro gerado pelo banco; a sequência é reiniciada pelo seed
    id = Column(Integer, primary_key=True)
