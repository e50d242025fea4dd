# restaurante_api/api/endpoints/comandas.py
from typing import Annotated, Any, List

from fastapi import APIRouter, Depends, HTTPException, Path, status

from restaurante_api import schemas
from restaurante_api.api import deps
from restaurante_api.api.errors import tratar_erro_banco
from restaurante_api.db.store import RestauranteStore
from restaurante_api.schemas.validacao import INTEIRO_MAX
from restaurante_api.services.redis_service import RedisService

router = APIRouter()

ComandaId = Annotated[int, Path(gt=0, le=INTEIRO_MAX, description="ID da comanda")]
NumeroMesa = Annotated[int, Path(gt=0, le=INTEIRO_MAX, description="Número da mesa")]

RespostaComanda = schemas.Resposta[schemas.Comanda]
RespostaListaComandas = schemas.Resposta[List[schemas.Comanda]]


@router.get("", response_model=RespostaListaComandas, response_model_exclude_unset=True)
async def listar_comandas(store: RestauranteStore = Depends(deps.get_store)) -> Any:
    """
    Retorna todas as comandas, das mais recentes para as mais antigas.
    """
    with tratar_erro_banco("Erro ao listar comandas"):
        comandas = await store.comandas.get_multi()
    return schemas.Resposta(
        sucesso=True,
        dados=[schemas.Comanda.model_validate(c) for c in comandas],
    )


# Declarada antes de /{comanda_id} para não ser capturada por ela
@router.get("/mesa/{numero_mesa}", response_model=RespostaListaComandas, response_model_exclude_unset=True)
async def listar_comandas_por_mesa(
    numero_mesa: NumeroMesa,
    store: RestauranteStore = Depends(deps.get_store),
) -> Any:
    """
    Retorna todas as comandas de uma mesa específica.
    """
    with tratar_erro_banco("Erro ao listar comandas da mesa"):
        comandas = await store.comandas.get_multi_by_mesa(mesa=numero_mesa)
    return schemas.Resposta(
        sucesso=True,
        dados=[schemas.Comanda.model_validate(c) for c in comandas],
    )


@router.get("/{comanda_id}", response_model=RespostaComanda, response_model_exclude_unset=True)
async def obter_comanda(
    comanda_id: ComandaId,
    store: RestauranteStore = Depends(deps.get_store),
) -> Any:
    """
    Retorna uma comanda específica pelo ID.
    """
    with tratar_erro_banco("Erro ao buscar comanda"):
        comanda = await store.comandas.get(comanda_id)
    if not comanda:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Comanda não encontrada")
    return schemas.Resposta(sucesso=True, dados=schemas.Comanda.model_validate(comanda))


@router.post(
    "",
    response_model=RespostaComanda,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
async def criar_comanda(
    *,
    comanda_in: schemas.ComandaCreate,
    store: RestauranteStore = Depends(deps.get_store),
    eventos: RedisService = Depends(deps.get_eventos),
) -> Any:
    """
    Cria uma nova comanda com status inicial "pendente".
    Body: { mesa, itens: [{ id, nome, quantidade, preco_unitario, subtotal? }], total }
    """
    with tratar_erro_banco("Erro ao criar comanda"):
        comanda = await store.comandas.create(obj_in=comanda_in)
    dados = schemas.Comanda.model_validate(comanda)

    await eventos.publicar_evento_comanda(
        "comanda_criada", {"comanda_id": dados.id, "mesa": dados.mesa, "status": dados.status.value}
    )
    return schemas.Resposta(sucesso=True, mensagem="Comanda criada com sucesso", dados=dados)


@router.patch("/{comanda_id}", response_model=RespostaComanda, response_model_exclude_unset=True)
async def atualizar_status_comanda(
    *,
    comanda_id: ComandaId,
    status_in: schemas.ComandaStatusUpdate,
    store: RestauranteStore = Depends(deps.get_store),
    eventos: RedisService = Depends(deps.get_eventos),
) -> Any:
    """
    Atualiza o status de uma comanda.
    Body: { status: 'pendente' | 'em_preparo' | 'pronto' | 'entregue' | 'cancelado' }
    """
    with tratar_erro_banco("Erro ao atualizar status da comanda"):
        comanda = await store.comandas.update_status(comanda_id, status=status_in.status)
    if not comanda:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Comanda não encontrada")
    dados = schemas.Comanda.model_validate(comanda)

    await eventos.publicar_evento_comanda(
        "status_atualizado", {"comanda_id": dados.id, "mesa": dados.mesa, "status": dados.status.value}
    )
    return schemas.Resposta(
        sucesso=True,
        mensagem="Status da comanda atualizado com sucesso",
        dados=dados,
    )


@router.delete("/{comanda_id}", response_model=RespostaComanda, response_model_exclude_unset=True)
async def deletar_comanda(
    comanda_id: ComandaId,
    store: RestauranteStore = Depends(deps.get_store),
    eventos: RedisService = Depends(deps.get_eventos),
) -> Any:
    """
    Remove uma comanda e devolve o registro removido.
    """
    with tratar_erro_banco("Erro ao deletar comanda"):
        comanda = await store.comandas.remove(comanda_id)
    if not comanda:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Comanda não encontrada")
    dados = schemas.Comanda.model_validate(comanda)

    await eventos.publicar_evento_comanda("comanda_removida", {"comanda_id": dados.id, "mesa": dados.mesa})
    return schemas.Resposta(sucesso=True, mensagem="Comanda removida com sucesso", dados=dados)
