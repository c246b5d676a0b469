"""NomeUsuario API router with CRUD operations.

Outcome messages are sent as bare JSON strings, e.g. a missing user answers
404 with the body `"Usuário não encontrado."`.
"""

import logging
from typing import List, Union
from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from sprint03.api.dependencies import get_nome_usuario_repository
from sprint03.database.nome_usuario_repository import NomeUsuarioStore
from sprint03.models.lookup import NotFound
from sprint03.models.nome_usuario import NomeUsuario, NomeUsuarioPayload

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Usuário não encontrado."
UPDATED_MESSAGE = "Usuário atualizado com sucesso."
DELETED_MESSAGE = "Usuário removido com sucesso."

NOT_FOUND_RESPONSE = {404: {"description": "Usuário não encontrado", "model": str}}

router = APIRouter(prefix="/api/nomeusuarios", tags=["NomeUsuario"])


def _not_found(result: NotFound) -> JSONResponse:
    logger.info(f"User {result.id} not found")
    return JSONResponse(status_code=404, content=NOT_FOUND_MESSAGE)


@router.get(
    "",
    response_model=List[NomeUsuario],
    summary="Lista todos os usuários",
    description="Retorna uma lista de todos os usuários cadastrados.",
    responses={200: {"description": "Usuários encontrados com sucesso"}},
)
def list_nome_usuarios(
    repository: NomeUsuarioStore = Depends(get_nome_usuario_repository),
) -> List[NomeUsuario]:
    return repository.get_all()


@router.get(
    "/{user_id}",
    response_model=NomeUsuario,
    summary="Busca um usuário por ID",
    description="Retorna um único usuário pelo seu identificador.",
    responses={200: {"description": "Usuário encontrado com sucesso"}, **NOT_FOUND_RESPONSE},
)
def get_nome_usuario(
    user_id: int,
    repository: NomeUsuarioStore = Depends(get_nome_usuario_repository),
) -> Union[NomeUsuario, JSONResponse]:
    result = repository.get(user_id)
    if isinstance(result, NotFound):
        return _not_found(result)
    return result.value


@router.post(
    "",
    response_model=NomeUsuario,
    status_code=201,
    summary="Cria um novo usuário",
    description="Adiciona um novo usuário ao sistema.",
    responses={201: {"description": "Usuário criado com sucesso"}},
)
def create_nome_usuario(
    payload: NomeUsuarioPayload,
    request: Request,
    response: Response,
    repository: NomeUsuarioStore = Depends(get_nome_usuario_repository),
) -> NomeUsuario:
    created = repository.create(payload)
    response.headers["Location"] = str(request.url_for("get_nome_usuario", user_id=created.id))
    return created


@router.put(
    "/{user_id}",
    response_model=str,
    summary="Atualiza um usuário",
    description="Modifica os dados de um usuário existente.",
    responses={200: {"description": "Usuário atualizado com sucesso"}, **NOT_FOUND_RESPONSE},
)
def update_nome_usuario(
    user_id: int,
    payload: NomeUsuarioPayload,
    repository: NomeUsuarioStore = Depends(get_nome_usuario_repository),
) -> Union[str, JSONResponse]:
    result = repository.get(user_id)
    if isinstance(result, NotFound):
        return _not_found(result)
    # The route id wins over anything in the body
    repository.update(result.value.with_fields(payload))
    return UPDATED_MESSAGE


@router.delete(
    "/{user_id}",
    response_model=str,
    summary="Remove um usuário",
    description="Exclui um usuário existente do sistema.",
    responses={200: {"description": "Usuário removido com sucesso"}, **NOT_FOUND_RESPONSE},
)
def delete_nome_usuario(
    user_id: int,
    repository: NomeUsuarioStore = Depends(get_nome_usuario_repository),
) -> Union[str, JSONResponse]:
    result = repository.get(user_id)
    if isinstance(result, NotFound):
        return _not_found(result)
    repository.delete(user_id)
    return DELETED_MESSAGE
