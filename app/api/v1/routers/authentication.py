from typing import Optional

from fastapi import APIRouter, Depends, status

from app.api.v1.dependencies import (
    get_auth_service,
    get_client_identifier,
    require_auth,
)
from app.features.authentication.services import AuthService, AuthContext
from app.features.authentication.schemas import LoginIn, TokenOut, ClaimsOut

router = APIRouter(
    prefix="/login",
    tags=["auth"],
    responses={401: {"description": "Unauthorized"}},
)

# -----------------------------
# Login
# -----------------------------
@router.post(
    "",
    summary="Se connecter avec la clé partagée",
    description="Vérifie la clé, émet un token signé (7 jours) et l'enregistre comme session.",
    response_model=TokenOut,
    responses={
        400: {"description": "Corps invalide"},
        500: {"description": "Token non généré ou non persisté"},
    },
)
def login(
    payload: LoginIn,
    svc: AuthService = Depends(get_auth_service),
    client_identifier: Optional[str] = Depends(get_client_identifier),
):
    return svc.issue(payload, client_identifier=client_identifier)

# -----------------------------
# Session courante
# -----------------------------
@router.get(
    "",
    summary="Vérifier le token courant",
    response_model=ClaimsOut,
)
def current_session(auth: AuthContext = Depends(require_auth)):
    return AuthService.describe(auth.claims)

# -----------------------------
# Logout
# -----------------------------
@router.delete(
    "",
    summary="Se déconnecter (révocation du token courant)",
    status_code=status.HTTP_204_NO_CONTENT,
)
def logout(
    auth: AuthContext = Depends(require_auth),
    svc: AuthService = Depends(get_auth_service),
):
    svc.revoke(auth.token)
    return None
