"""
➡️ But : Table des utilisateurs (Credential Store).

Le hash du mot de passe ne sort jamais de cette couche : les schémas de sortie
(todo_api.features.users.schemas) ne le déclarent pas.
"""

from sqlmodel import Field

from .base import BaseModelDB

class User(BaseModelDB, table=True):
    name: str
    email: str = Field(index=True, unique=True)
    password_hash: str
