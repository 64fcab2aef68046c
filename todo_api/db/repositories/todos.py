"""
➡️ But : Encapsuler toutes les opérations de base de données.

TodoRepository : CRUD sur la table Todo, toujours filtré par propriétaire
pour les écritures (WHERE id = ... AND user_id = ...).
"""

from typing import Sequence

from sqlalchemy import delete, update
from sqlmodel import select

from todo_api.db.repositories.base import BaseRepository
from todo_api.db.models.todos import Todo

class TodoRepository(BaseRepository[Todo]):
    model = Todo

    def list_for_user(self, user_id: int) -> Sequence[Todo]:
        """Todos d'un utilisateur, les plus récents d'abord."""
        return self.session.exec(
            select(self.model)
            .where(self.model.user_id == user_id)
            .order_by(self.model.created_at.desc(), self.model.id.desc())
        ).all()

    def update_owned(self, todo: Todo, *, user_id: int, **changes) -> int:
        """
        Applique `changes` uniquement si la ligne appartient toujours à `user_id`.
        Retourne le nombre de lignes modifiées (0 si supprimée entre-temps).
        """
        result = self.session.exec(
            update(self.model)
            .where(self.model.id == todo.id)
            .where(self.model.user_id == user_id)
            .values(**changes)
        )
        self._commit()
        if result.rowcount:
            self.session.refresh(todo)
        return result.rowcount

    def delete_owned(self, todo_id: int, *, user_id: int) -> int:
        result = self.session.exec(
            delete(self.model)
            .where(self.model.id == todo_id)
            .where(self.model.user_id == user_id)
        )
        self._commit()
        return result.rowcount
