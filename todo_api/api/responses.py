"""
➡️ But : Enveloppe commune à toutes les réponses JSON.

{success, message, data?, error?, count?} ; les clés optionnelles absentes ne sont pas
sérialisées (routes déclarées avec response_model_exclude_none=True).
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")

class ApiResponse(BaseModel, Generic[DataT]):
    success: bool = True
    message: str
    data: Optional[DataT] = None
    error: Optional[str] = None
    count: Optional[int] = None

class HealthOut(BaseModel):
    success: bool = True
    message: str
    timestamp: str


def error_body(message: str, error: Optional[str] = None) -> dict:
    body = {"success": False, "message": message}
    if error is not None:
        body["error"] = error
    return body
