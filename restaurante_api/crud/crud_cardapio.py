# restaurante_api/crud/crud_cardapio.py
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import async_sessionmaker

from restaurante_api.db.models.cardapio import Cardapio
from restaurante_api.schemas.cardapio import CardapioCreate, CardapioUpdate


class CRUDCardapio:
    def __init__(self, session_factory: async_sessionmaker):
        self.session_factory = session_factory

    async def get(self, id: int) -> Optional[Cardapio]:
        async with self.session_factory() as db:
            return await db.get(Cardapio, id)

    async def get_multi(self) -> List[Cardapio]:
        async with self.session_factory() as db:
            result = await db.execute(select(Cardapio).order_by(Cardapio.id))
            return list(result.scalars().all())

    async def create(self, *, obj_in: CardapioCreate) -> Cardapio:
        db_obj = Cardapio(
            nome=obj_in.nome,
            preco=obj_in.preco,
            descricao=obj_in.descricao,
        )
        async with self.session_factory() as db:
            db.add(db_obj)
            await db.commit()
            await db.refresh(db_obj)
        return db_obj

    async def update(self, id: int, *, obj_in: CardapioUpdate) -> Optional[Cardapio]:
        """Substitui os campos do item. Retorna None se o item não existir."""
        async with self.session_factory() as db:
            db_obj = await db.get(Cardapio, id)
            if db_obj is None:
                return None

            update_data = obj_in.model_dump()
            for field in update_data:
                setattr(db_obj, field, update_data[field])

            await db.commit()
            await db.refresh(db_obj)
            return db_obj

    async def remove(self, id: int) -> Optional[Cardapio]:
        async with self.session_factory() as db:
            obj = await db.get(Cardapio, id)
            if obj:
                await db.delete(obj)
                await db.commit()
            return obj
