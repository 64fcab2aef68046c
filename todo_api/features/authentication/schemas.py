from typing import Optional

from pydantic import BaseModel, Field

from todo_api.features.users.schemas import UserSummary

# ---------- Inputs ----------
# Champs optionnels : l'ordre des validations (présence, format, longueur)
# est appliqué par AuthService pour renvoyer le bon message.

class SignUpIn(BaseModel):
    name: Optional[str] = Field(None, examples=["Alice"])
    email: Optional[str] = Field(None, examples=["alice@example.com"])
    password: Optional[str] = Field(None, examples=["secret1"])

class SignInIn(BaseModel):
    email: Optional[str] = Field(None, examples=["alice@example.com"])
    password: Optional[str] = Field(None, examples=["secret1"])


# ---------- Outputs ----------

class LoginOut(BaseModel):
    user: UserSummary
    token: str
