"""
➡️ But : Définir les formats de sortie d'un utilisateur (couche validation).

UserSummary → utilisateur renvoyé au login

UserOut → utilisateur renvoyé au sign-up

Sépare les modèles "de stockage" (ORM) de ceux "de transfert" (I/O API).

🔹 Avantages :

Empêche d'exposer par erreur des infos sensibles (ex: hash de mot de passe).
"""

from datetime import datetime

from sqlmodel import SQLModel

class UserSummary(SQLModel):
    id: int
    name: str
    email: str
    # password_hash: jamais exposé

class UserOut(UserSummary):
    created_at: datetime
