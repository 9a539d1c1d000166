from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_auth_service, get_current_user_id
from app.core.errors import internal_failure
from app.features.authentication.services import AuthService
from app.features.authentication.schemas import (
    RegisterIn,
    RegisterOut,
    LoginIn,
    LoginOut,
)
from app.features.users.schemas import UserOut  # pour /me

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
    responses={400: {"description": "Validation failed"}},
)

# -----------------------------
# Register
# -----------------------------
@router.post(
    "/register",
    summary="Créer un compte",
    status_code=status.HTTP_201_CREATED,
    response_model=RegisterOut,
    responses={400: {"description": "Email ou nom d'utilisateur déjà utilisé, ou corps invalide"}},
)
def register(payload: RegisterIn, svc: AuthService = Depends(get_auth_service)):
    with internal_failure("Failed to register user"):
        user = svc.register(payload)
    return RegisterOut(user=UserOut.model_validate(user))

# -----------------------------
# Login
# -----------------------------
@router.post(
    "/login",
    summary="Se connecter",
    description="Retourne un access token (bearer) et l'utilisateur connecté.",
    response_model=LoginOut,
    responses={401: {"description": "Invalid email or password"}},
)
def login(payload: LoginIn, svc: AuthService = Depends(get_auth_service)):
    with internal_failure("Failed to log in"):
        return svc.login(payload)

# -----------------------------
# Me (profil courant)
# -----------------------------
@router.get(
    "/me",
    summary="Récupérer l'utilisateur courant",
    response_model=UserOut,
    responses={
        200: {"description": "Utilisateur courant"},
        401: {"description": "Token absent, invalide ou expiré"},
        404: {"description": "Utilisateur introuvable"},
    },
)
def me(
    user_id: int = Depends(get_current_user_id),
    svc: AuthService = Depends(get_auth_service),
):
    with internal_failure("Failed to fetch user"):
        return svc.get_current_user(user_id)
