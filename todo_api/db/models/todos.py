from sqlmodel import Field

from .base import BaseModelDB

class Todo(BaseModelDB, table=True):
    title: str
    completed: bool = Field(default=False)
    # Propriétaire, fixé à la création depuis le token
    user_id: int = Field(index=True, foreign_key="user.id")
