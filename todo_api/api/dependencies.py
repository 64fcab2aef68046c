"""
➡️ But : Centraliser les dépendances réutilisables des routes.

Exemples :

get_auth_service() / get_todo_service() : créent un service à partir d'une session DB.

require_auth() : vérifie le bearer token des routes protégées.

🔹 Avantages :

Routes plus propres (pas de code dupliqué).

Facile à injecter dans plusieurs endpoints (Depends()).
"""

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Request, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlmodel import Session

from todo_api.core.errors import TokenInvalid, Unauthenticated
from todo_api.db.session import get_session

from todo_api.db.repositories.users import UserRepository
from todo_api.features.authentication.services import AuthService

from todo_api.db.repositories.todos import TodoRepository
from todo_api.features.todos.services import TodoService

from todo_api.security.tokens import JWTSettings, decode_token

logger = logging.getLogger(__name__)


# -----------------------------
# Process-wide objects (créés par create_app)
# -----------------------------
def get_jwt_settings(request: Request) -> JWTSettings:
    return request.app.state.jwt_settings


# -----------------------------
# Auth
# -----------------------------
def get_auth_service(
    session: Session = Depends(get_session),
    jwt_settings: JWTSettings = Depends(get_jwt_settings),
) -> AuthService:
    return AuthService(user_repo=UserRepository(session), jwt_settings=jwt_settings)


# -----------------------------
# Todos
# -----------------------------
def get_todo_repository(session: Session = Depends(get_session)) -> TodoRepository:
    return TodoRepository(session)

def get_todo_service(repo: TodoRepository = Depends(get_todo_repository)) -> TodoService:
    return TodoService(repo)


# -----------------------------
# Authentication data
# -----------------------------
# auto_error=False : l'absence de header doit donner 401 (et notre enveloppe JSON)
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class AuthContext:
    user_id: int
    email: str


def require_auth(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
    jwt_settings: JWTSettings = Depends(get_jwt_settings),
) -> AuthContext:
    """
    Vérifie `Authorization: Bearer <token>` et place les claims dans request.state.auth.
    Pas de relecture en base : les claims font foi jusqu'à expiration (pas de révocation).
    """
    if not credentials or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise Unauthenticated("Access denied. No token provided.")

    try:
        claims = decode_token(credentials.credentials, jwt_settings)
    except TokenInvalid as e:
        logger.info("Rejected bearer token: %s", e.message)
        raise Unauthenticated() from e

    ctx = AuthContext(user_id=claims["userId"], email=claims["email"])
    request.state.auth = ctx
    return ctx
