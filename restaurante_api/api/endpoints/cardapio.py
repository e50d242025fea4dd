# restaurante_api/api/endpoints/cardapio.py
from typing import Annotated, Any, List

from fastapi import APIRouter, Depends, HTTPException, Path, status

from restaurante_api import schemas
from restaurante_api.api import deps
from restaurante_api.api.errors import tratar_erro_banco
from restaurante_api.db.store import RestauranteStore
from restaurante_api.schemas.validacao import INTEIRO_MAX

router = APIRouter()

ItemId = Annotated[int, Path(gt=0, le=INTEIRO_MAX, description="ID do item no cardápio")]


@router.get("", response_model=schemas.Resposta[List[schemas.CardapioItem]], response_model_exclude_unset=True)
async def listar_cardapio(store: RestauranteStore = Depends(deps.get_store)) -> Any:
    """
    Retorna todos os itens do cardápio, ordenados por ID.
    """
    with tratar_erro_banco("Erro ao acessar o banco de dados"):
        itens = await store.cardapio.get_multi()
    return schemas.Resposta(
        sucesso=True,
        dados=[schemas.CardapioItem.model_validate(item) for item in itens],
    )


@router.get("/{item_id}", response_model=schemas.Resposta[schemas.CardapioItem], response_model_exclude_unset=True)
async def obter_item_cardapio(
    item_id: ItemId,
    store: RestauranteStore = Depends(deps.get_store),
) -> Any:
    """
    Retorna um item específico do cardápio pelo ID.
    """
    with tratar_erro_banco("Erro ao buscar item do cardápio"):
        item = await store.cardapio.get(item_id)
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item não encontrado no cardápio")
    return schemas.Resposta(sucesso=True, dados=schemas.CardapioItem.model_validate(item))


@router.post(
    "",
    response_model=schemas.Resposta[schemas.CardapioItem],
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
async def criar_item_cardapio(
    *,
    item_in: schemas.CardapioCreate,
    store: RestauranteStore = Depends(deps.get_store),
) -> Any:
    """
    Cria um novo item no cardápio.
    Body: { nome, preco, descricao? }
    """
    with tratar_erro_banco("Erro ao criar item no cardápio"):
        item = await store.cardapio.create(obj_in=item_in)
    return schemas.Resposta(
        sucesso=True,
        mensagem="Item adicionado ao cardápio com sucesso",
        dados=schemas.CardapioItem.model_validate(item),
    )


@router.put("/{item_id}", response_model=schemas.Resposta[schemas.CardapioItem], response_model_exclude_unset=True)
async def atualizar_item_cardapio(
    *,
    item_id: ItemId,
    item_in: schemas.CardapioUpdate,
    store: RestauranteStore = Depends(deps.get_store),
) -> Any:
    """
    Atualiza (substitui) os campos de um item existente.
    """
    with tratar_erro_banco("Erro ao atualizar item do cardápio"):
        item = await store.cardapio.update(item_id, obj_in=item_in)
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item não encontrado")
    return schemas.Resposta(
        sucesso=True,
        mensagem="Item atualizado com sucesso",
        dados=schemas.CardapioItem.model_validate(item),
    )


@router.delete("/{item_id}", response_model=schemas.Resposta[schemas.CardapioItem], response_model_exclude_unset=True)
async def deletar_item_cardapio(
    item_id: ItemId,
    store: RestauranteStore = Depends(deps.get_store),
) -> Any:
    """
    Remove um item do cardápio e devolve o registro removido.
    """
    with tratar_erro_banco("Erro ao deletar item do cardápio"):
        item = await store.cardapio.remove(item_id)
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item não encontrado")
    return schemas.Resposta(
        sucesso=True,
        mensagem="Item removido do cardápio com sucesso",
        dados=schemas.CardapioItem.model_validate(item),
    )
