"""
➡️ But : Encapsuler toutes les opérations de base de données.

UserRepository : lecture par email et création sur la table User.

Ne contient aucune logique métier, juste de la persistance.

🔹 Avantages :

Réutilisable (les services n'ont pas à savoir comment la DB fonctionne).

Testable indépendamment (mock du repo sans base réelle).
"""

from __future__ import annotations

from typing import Optional
from sqlmodel import select

from todo_api.db.repositories.base import BaseRepository
from todo_api.db.models.users import User

class UserRepository(BaseRepository[User]):
    """
    Repository pour la table User.
    Hérite du CRUD générique de BaseRepository.
    Contient uniquement les requêtes spécifiques à User.
    """
    model = User

    def get_by_email(self, email: str) -> Optional[User]:
        """Retourne un utilisateur par son email (comparaison exacte), ou None."""
        return self.session.exec(
            select(self.model).where(self.model.email == email)
        ).first()
