import logging
import re
from datetime import datetime, timezone
from typing import Callable

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from todo_api.core.errors import (
    ConflictError,
    InvalidCredentials,
    StoreError,
    ValidationError,
)
from todo_api.db.models.users import User
from todo_api.db.repositories.users import UserRepository
from todo_api.security.password import verify_password, hash_password
from todo_api.security.tokens import JWTSettings, create_access_token
from todo_api.features.authentication.schemas import SignUpIn, SignInIn, LoginOut
from todo_api.features.users.schemas import UserSummary

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 6


class AuthService:
    """
    Service d'authentification : orchestre le repository users + hash + tokens.
    Ne contient pas d'accès SQL direct et lève des erreurs typées (todo_api.core.errors).
    """

    def __init__(
        self,
        *,
        user_repo: UserRepository,
        jwt_settings: JWTSettings,
        now_fn: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self.user_repo = user_repo
        self.jwt = jwt_settings
        self.now_fn = now_fn

    # ---------- Sign up ----------
    def sign_up(self, payload: SignUpIn) -> User:
        # 1) présence, 2) format email, 3) longueur du mot de passe
        if not payload.name or not payload.email or not payload.password:
            raise ValidationError("Please provide name, email, and password.")
        if not EMAIL_RE.match(payload.email):
            raise ValidationError("Please provide a valid email address.")
        if len(payload.password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long."
            )

        try:
            existing = self.user_repo.get_by_email(payload.email)
        except SQLAlchemyError as e:
            logger.exception("Signup lookup failed")
            raise StoreError("Error creating user account.", detail=str(e)) from e
        if existing:
            raise ConflictError("User with this email already exists.")

        try:
            user = self.user_repo.create(
                name=payload.name,
                email=payload.email,
                password_hash=hash_password(payload.password),
            )
        except IntegrityError as e:
            # Inscription concurrente avec le même email (index unique)
            raise ConflictError("User with this email already exists.") from e
        except SQLAlchemyError as e:
            logger.exception("Signup insert failed")
            raise StoreError("Error creating user account.", detail=str(e)) from e

        logger.info("User %s registered", user.id)
        return user

    # ---------- Sign in ----------
    def sign_in(self, payload: SignInIn) -> LoginOut:
        if not payload.email or not payload.password:
            raise ValidationError("Please provide email and password.")

        try:
            user = self.user_repo.get_by_email(payload.email)
        except SQLAlchemyError:
            logger.exception("Login lookup failed")
            user = None

        if not user or not verify_password(payload.password, user.password_hash):
            # Ne pas révéler si l'utilisateur existe
            logger.info("Failed login attempt")
            raise InvalidCredentials()

        token = create_access_token(
            user_id=user.id,
            email=user.email,
            settings=self.jwt,
            now=self.now_fn(),
        )
        return LoginOut(user=UserSummary.model_validate(user, from_attributes=True), token=token)
