# restaurante_api/crud/crud_comanda.py
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import async_sessionmaker

from restaurante_api.db.models.comanda import Comanda, StatusComanda, agora
from restaurante_api.schemas.comanda import ComandaCreate


class CRUDComanda:
    def __init__(self, session_factory: async_sessionmaker):
        self.session_factory = session_factory

    async def get(self, id: int) -> Optional[Comanda]:
        async with self.session_factory() as db:
            return await db.get(Comanda, id)

    async def get_multi(self) -> List[Comanda]:
        """Todas as comandas, das mais recentes para as mais antigas."""
        async with self.session_factory() as db:
            result = await db.execute(
                select(Comanda).order_by(Comanda.criado_em.desc(), Comanda.id.desc())
            )
            return list(result.scalars().all())

    async def get_multi_by_mesa(self, *, mesa: int) -> List[Comanda]:
        async with self.session_factory() as db:
            result = await db.execute(
                select(Comanda)
                .where(Comanda.mesa == mesa)
                .order_by(Comanda.criado_em.desc(), Comanda.id.desc())
            )
            return list(result.scalars().all())

    async def create(self, *, obj_in: ComandaCreate) -> Comanda:
        momento = agora()
        db_obj = Comanda(
            mesa=obj_in.mesa,
            status=StatusComanda.PENDENTE.value,
            itens=list(obj_in.itens),
            total=obj_in.total,
            criado_em=momento,
            atualizado_em=momento,
        )
        async with self.session_factory() as db:
            db.add(db_obj)
            await db.commit()
            await db.refresh(db_obj)
        return db_obj

    async def update_status(self, id: int, *, status: StatusComanda) -> Optional[Comanda]:
        """Atualiza o status e renova `atualizado_em`. Retorna None se não existir."""
        async with self.session_factory() as db:
            db_obj = await db.get(Comanda, id)
            if db_obj is None:
                return None

            db_obj.status = StatusComanda(status).value
            db_obj.atualizado_em = agora()
            await db.commit()
            await db.refresh(db_obj)
            return db_obj

    async def remove(self, id: int) -> Optional[Comanda]:
        async with self.session_factory() as db:
            obj = await db.get(Comanda, id)
            if obj:
                await db.delete(obj)
                await db.commit()
            return obj
