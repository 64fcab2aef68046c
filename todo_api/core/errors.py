"""
➡️ But : Définir la hiérarchie d'erreurs métier de l'API.

Chaque erreur porte son code HTTP : les services lèvent l'erreur typée,
la couche web (todo_api.api.errors) la convertit en réponse JSON.

Hiérarchie :
    AppError (500)
    ├── ValidationError (400)
    ├── ConflictError (409)
    ├── AuthError (401)
    │   ├── InvalidCredentials
    │   ├── Unauthenticated
    │   └── TokenInvalid
    │       └── TokenExpired
    ├── ForbiddenError (403)
    ├── NotFoundError (404)
    ├── StoreError (500)
    └── HashingError (500)
"""

from typing import Optional

from fastapi import status


class AppError(Exception):
    """
    Erreur de base.

    - `message` : texte renvoyé au client
    - `detail` : contexte interne (ex: message du store), exposé uniquement en development
    """
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error."

    def __init__(self, message: Optional[str] = None, *, detail: Optional[str] = None):
        self.message = message or self.default_message
        self.detail = detail
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request."


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Resource already exists."


# ---------- Authentification ----------

class AuthError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication failed."


class InvalidCredentials(AuthError):
    # Même message pour "utilisateur inconnu" et "mauvais mot de passe"
    default_message = "Invalid email or password."


class Unauthenticated(AuthError):
    default_message = "Invalid or expired token."


class TokenInvalid(AuthError):
    default_message = "Invalid token."


class TokenExpired(TokenInvalid):
    default_message = "Token expired."


# ---------- Accès / ressources ----------

class ForbiddenError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden."


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found."


# ---------- Infrastructure ----------

class StoreError(AppError):
    default_message = "Store operation failed."


class HashingError(AppError):
    default_message = "Password hashing failed."
