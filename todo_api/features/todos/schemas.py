"""
➡️ But : Définir les formats d'entrée/sortie de l'API (couche validation).

TodoCreate → corps de requête POST

TodoUpdate → corps PUT (partiel)

TodoOut → réponse de l'API
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

class TodoCreate(BaseModel):
    # Titre vide/blanc refusé par TodoService (message dédié)
    title: Optional[str] = Field(None, examples=["Acheter du lait"])
    completed: bool = Field(False, examples=[False])

class TodoUpdate(BaseModel):
    title: Optional[str] = Field(None, examples=["Aller courir"])
    completed: Optional[bool] = Field(None, examples=[True])

class TodoOut(BaseModel):
    id: int
    title: str
    completed: bool
    user_id: int
    created_at: datetime

    model_config = {"from_attributes": True}
