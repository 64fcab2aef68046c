"""
➡️ But : Contenir la logique métier des todos : orchestrer le repo, appliquer les règles, gérer les erreurs.

TodoService : chaque opération reçoit le user_id authentifié.
- Lecture limitée aux todos du user.
- Update/Delete : lecture de la ligne (404 si absente), contrôle du propriétaire (403),
  puis écriture filtrée à nouveau par user_id.

🔹 Avantages :

Code métier découplé du web.

Test unitaire possible sans passer par FastAPI.
"""

import logging
from typing import Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError

from todo_api.core.errors import ForbiddenError, NotFoundError, StoreError, ValidationError
from todo_api.db.models.todos import Todo
from todo_api.db.repositories.todos import TodoRepository

logger = logging.getLogger(__name__)


class TodoService:
    def __init__(self, repo: TodoRepository):
        self.repo = repo

    # -------- Helpers permissions --------

    @staticmethod
    def _is_owner(user_id: int, todo: Todo) -> bool:
        return todo.user_id == user_id

    def _get_owned(self, user_id: int, todo_id: int, *, action: str, store_message: str) -> Todo:
        try:
            todo = self.repo.get(todo_id)
        except SQLAlchemyError as e:
            logger.exception("Todo lookup failed")
            raise StoreError(store_message, detail=str(e)) from e
        if not todo:
            raise NotFoundError("Todo not found.")
        if not self._is_owner(user_id, todo):
            logger.warning("User %s denied %s on todo %s", user_id, action, todo_id)
            raise ForbiddenError(f"You are not authorized to {action} this todo.")
        return todo

    # -------- CRUD --------

    def create(self, user_id: int, title: Optional[str], completed: bool = False) -> Todo:
        if not title or not title.strip():
            raise ValidationError("Please provide a todo title.")
        try:
            return self.repo.create(title=title.strip(), completed=completed, user_id=user_id)
        except SQLAlchemyError as e:
            logger.exception("Todo insert failed")
            raise StoreError("Error creating todo.", detail=str(e)) from e

    def list(self, user_id: int) -> Sequence[Todo]:
        try:
            return self.repo.list_for_user(user_id)
        except SQLAlchemyError as e:
            logger.exception("Todo listing failed")
            raise StoreError("Error retrieving todos.", detail=str(e)) from e

    def update(
        self,
        user_id: int,
        todo_id: int,
        *,
        title: Optional[str] = None,
        completed: Optional[bool] = None,
    ) -> Todo:
        todo = self._get_owned(user_id, todo_id, action="update", store_message="Error updating todo.")

        changes = {}
        if title is not None and title.strip():
            changes["title"] = title.strip()
        if completed is not None:
            changes["completed"] = completed
        if not changes:
            raise ValidationError("Please provide title or completed status to update.")

        try:
            updated = self.repo.update_owned(todo, user_id=user_id, **changes)
        except SQLAlchemyError as e:
            logger.exception("Todo update failed")
            raise StoreError("Error updating todo.", detail=str(e)) from e
        if not updated:
            # Supprimé entre la lecture et l'écriture
            raise StoreError("Error updating todo.", detail="No row affected")
        return todo

    def delete(self, user_id: int, todo_id: int) -> None:
        self._get_owned(user_id, todo_id, action="delete", store_message="Error deleting todo.")
        try:
            self.repo.delete_owned(todo_id, user_id=user_id)
        except SQLAlchemyError as e:
            logger.exception("Todo delete failed")
            raise StoreError("Error deleting todo.", detail=str(e)) from e
