"""
Tests : AuthService (inscription / connexion) sur une base SQLite en mémoire.
"""

from datetime import timedelta

import pytest
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from todo_api.core.errors import ConflictError, InvalidCredentials, StoreError, ValidationError
from todo_api.db.repositories.users import UserRepository
from todo_api.features.authentication.schemas import SignInIn, SignUpIn
from todo_api.features.authentication.services import AuthService
from todo_api.features.users.schemas import UserOut
from todo_api.security.tokens import JWTSettings, decode_token

JWT = JWTSettings(secret="unit-secret", ttl=timedelta(hours=1))


@pytest.fixture
def svc(session):
    return AuthService(user_repo=UserRepository(session), jwt_settings=JWT)


def test_sign_up_stores_hash_not_password(svc):
    user = svc.sign_up(SignUpIn(name="Alice", email="a@x.com", password="secret1"))
    assert user.id is not None
    assert user.password_hash != "secret1"
    out = UserOut.model_validate(user, from_attributes=True).model_dump()
    assert set(out) == {"id", "name", "email", "created_at"}

@pytest.mark.parametrize("payload,message", [
    ({"email": "a@x.com", "password": "secret1"}, "Please provide name, email, and password."),
    ({"name": "", "email": "a@x.com", "password": "secret1"}, "Please provide name, email, and password."),
    ({"name": "Alice", "password": "secret1"}, "Please provide name, email, and password."),
    ({"name": "Alice", "email": "a@x.com", "password": ""}, "Please provide name, email, and password."),
    # Le format de l'email est vérifié avant la longueur du mot de passe
    ({"name": "Alice", "email": "not-an-email", "password": "123"}, "Please provide a valid email address."),
    ({"name": "Alice", "email": "a @x.com", "password": "secret1"}, "Please provide a valid email address."),
    ({"name": "Alice", "email": "a@x", "password": "secret1"}, "Please provide a valid email address."),
    ({"name": "Alice", "email": "a@x.com", "password": "12345"}, "Password must be at least 6 characters long."),
])
def test_sign_up_validation_order(svc, payload, message):
    with pytest.raises(ValidationError) as exc:
        svc.sign_up(SignUpIn(**payload))
    assert exc.value.message == message

@pytest.mark.parametrize("password", ["secret1", "another-password"])
def test_sign_up_duplicate_email_conflicts(svc, password):
    svc.sign_up(SignUpIn(name="Alice", email="a@x.com", password="secret1"))
    with pytest.raises(ConflictError):
        svc.sign_up(SignUpIn(name="Other", email="a@x.com", password=password))

def test_email_is_case_sensitive_as_stored(svc):
    svc.sign_up(SignUpIn(name="Alice", email="a@x.com", password="secret1"))
    user = svc.sign_up(SignUpIn(name="Alice", email="A@x.com", password="secret1"))
    assert user.email == "A@x.com"

def test_sign_in_returns_token_with_identity(svc):
    user = svc.sign_up(SignUpIn(name="Alice", email="a@x.com", password="secret1"))
    out = svc.sign_in(SignInIn(email="a@x.com", password="secret1"))
    assert out.user.id == user.id
    assert out.user.email == "a@x.com"
    claims = decode_token(out.token, JWT)
    assert claims["userId"] == user.id
    assert claims["email"] == "a@x.com"

def test_sign_in_failures_are_indistinguishable(svc):
    svc.sign_up(SignUpIn(name="Alice", email="a@x.com", password="secret1"))
    with pytest.raises(InvalidCredentials) as wrong_password:
        svc.sign_in(SignInIn(email="a@x.com", password="wrong-pass"))
    with pytest.raises(InvalidCredentials) as unknown_user:
        svc.sign_in(SignInIn(email="nobody@x.com", password="secret1"))
    assert wrong_password.value.message == unknown_user.value.message
    assert wrong_password.value.status_code == unknown_user.value.status_code == 401

def test_sign_in_requires_both_fields(svc):
    with pytest.raises(ValidationError) as exc:
        svc.sign_in(SignInIn(email="a@x.com"))
    assert exc.value.message == "Please provide email and password."


# ---------- Store en échec ----------

class _FailingLookupRepo:
    def get_by_email(self, email):
        raise SQLAlchemyError("connection lost")

class _FailingInsertRepo:
    def __init__(self, error):
        self.error = error

    def get_by_email(self, email):
        return None

    def create(self, **fields):
        raise self.error

def test_sign_in_store_failure_looks_like_bad_credentials():
    svc = AuthService(user_repo=_FailingLookupRepo(), jwt_settings=JWT)
    with pytest.raises(InvalidCredentials) as exc:
        svc.sign_in(SignInIn(email="a@x.com", password="secret1"))
    assert exc.value.message == "Invalid email or password."

def test_sign_up_lookup_failure_is_store_error():
    svc = AuthService(user_repo=_FailingLookupRepo(), jwt_settings=JWT)
    with pytest.raises(StoreError) as exc:
        svc.sign_up(SignUpIn(name="Alice", email="a@x.com", password="secret1"))
    assert exc.value.status_code == 500

def test_sign_up_insert_failure_is_store_error():
    svc = AuthService(user_repo=_FailingInsertRepo(SQLAlchemyError("disk full")), jwt_settings=JWT)
    with pytest.raises(StoreError) as exc:
        svc.sign_up(SignUpIn(name="Alice", email="a@x.com", password="secret1"))
    assert exc.value.status_code == 500
    assert exc.value.message == "Error creating user account."
    assert "disk full" in exc.value.detail

def test_sign_up_concurrent_duplicate_is_conflict():
    error = IntegrityError("INSERT INTO user", {}, Exception("UNIQUE constraint failed: user.email"))
    svc = AuthService(user_repo=_FailingInsertRepo(error), jwt_settings=JWT)
    with pytest.raises(ConflictError) as exc:
        svc.sign_up(SignUpIn(name="Alice", email="a@x.com", password="secret1"))
    assert exc.value.status_code == 409
    assert exc.value.message == "User with this email already exists."
