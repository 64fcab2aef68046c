"""
➡️ But : Définir les endpoints de l'API todos.

C'est la couche la plus proche du web :

Réceptionne les requêtes HTTP (GET, POST, PUT, DELETE)

Récupère l'utilisateur authentifié (require_auth) et appelle le service correspondant

Retourne l'enveloppe {success, message, data?, count?}

Toutes les routes de ce fichier sont protégées par bearer token.
"""

from typing import Annotated, List, Optional

from fastapi import APIRouter, Body, Depends, Path, status

from todo_api.api.dependencies import AuthContext, get_todo_service, require_auth
from todo_api.api.responses import ApiResponse
from todo_api.features.todos.schemas import TodoCreate, TodoUpdate, TodoOut
from todo_api.features.todos.services import TodoService

# Identifiant SQL 64 bits signé : au-delà, 400 comme tout id invalide
TodoId = Annotated[int, Path(ge=1, le=2**63 - 1)]

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
    responses={401: {"description": "Token absent, invalide ou expiré"}},
)

@router.post(
    "",
    summary="Créer un todo",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[TodoOut],
    response_model_exclude_none=True,
)
def create_todo(
    payload: TodoCreate,
    auth: AuthContext = Depends(require_auth),
    svc: TodoService = Depends(get_todo_service),
):
    todo = svc.create(auth.user_id, payload.title, payload.completed)
    return ApiResponse[TodoOut](message="Todo created successfully.", data=TodoOut.model_validate(todo))

@router.get(
    "",
    summary="Lister mes todos",
    description="Retourne les todos de l'utilisateur courant, les plus récents d'abord.",
    response_model=ApiResponse[List[TodoOut]],
    response_model_exclude_none=True,
)
def list_todos(
    auth: AuthContext = Depends(require_auth),
    svc: TodoService = Depends(get_todo_service),
):
    items = [TodoOut.model_validate(t) for t in svc.list(auth.user_id)]
    return ApiResponse[List[TodoOut]](
        message="Todos retrieved successfully.",
        count=len(items),
        data=items,
    )

@router.put(
    "/{todo_id}",
    summary="Mettre à jour un todo",
    response_model=ApiResponse[TodoOut],
    response_model_exclude_none=True,
    responses={
        403: {"description": "Todo d'un autre utilisateur"},
        404: {"description": "Todo introuvable"},
    },
)
def update_todo(
    todo_id: TodoId,
    # Corps optionnel : 404/403 sont vérifiés avant le contenu du patch
    payload: Optional[TodoUpdate] = Body(default=None),
    auth: AuthContext = Depends(require_auth),
    svc: TodoService = Depends(get_todo_service),
):
    payload = payload or TodoUpdate()
    todo = svc.update(auth.user_id, todo_id, title=payload.title, completed=payload.completed)
    return ApiResponse[TodoOut](message="Todo updated successfully.", data=TodoOut.model_validate(todo))

@router.delete(
    "/{todo_id}",
    summary="Supprimer un todo",
    response_model=ApiResponse[None],
    response_model_exclude_none=True,
    responses={
        403: {"description": "Todo d'un autre utilisateur"},
        404: {"description": "Todo introuvable"},
    },
)
def delete_todo(
    todo_id: TodoId,
    auth: AuthContext = Depends(require_auth),
    svc: TodoService = Depends(get_todo_service),
):
    svc.delete(auth.user_id, todo_id)
    return ApiResponse[None](message="Todo deleted successfully.")
