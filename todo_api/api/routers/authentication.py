from fastapi import APIRouter, Depends, status

from todo_api.api.dependencies import get_auth_service
from todo_api.api.responses import ApiResponse
from todo_api.features.authentication.services import AuthService
from todo_api.features.authentication.schemas import SignUpIn, SignInIn, LoginOut
from todo_api.features.users.schemas import UserOut

router = APIRouter(
    tags=["auth"],
)

# -----------------------------
# Sign-up
# -----------------------------
@router.post(
    "/signup",
    summary="Créer un compte",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[UserOut],
    response_model_exclude_none=True,
    responses={
        400: {"description": "Champs manquants, email invalide ou mot de passe trop court"},
        409: {"description": "Email déjà utilisé"},
    },
)
def sign_up(payload: SignUpIn, svc: AuthService = Depends(get_auth_service)):
    user = svc.sign_up(payload)
    return ApiResponse[UserOut](
        message="User registered successfully.",
        data=UserOut.model_validate(user, from_attributes=True),
    )

# -----------------------------
# Login
# -----------------------------
@router.post(
    "/login",
    summary="Se connecter",
    description="Retourne l'utilisateur et un bearer token (durée de vie JWT_EXPIRES_IN).",
    response_model=ApiResponse[LoginOut],
    response_model_exclude_none=True,
    responses={401: {"description": "Email ou mot de passe invalide"}},
)
def login(payload: SignInIn, svc: AuthService = Depends(get_auth_service)):
    return ApiResponse[LoginOut](message="Login successful.", data=svc.sign_in(payload))
