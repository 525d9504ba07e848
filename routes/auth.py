from typing import Optional
import logging

from fastapi import APIRouter, Depends, Header
from fastapi.security import OAuth2PasswordRequestForm
from pydantic import BaseModel

from models.users import AuthResult, LoginRequest, LogoutRequest, UserView
from services.auth_service import AuthenticationService
from dependencies import get_auth_service
from routes.errors import handle_service_exception

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


class LoginResponse(BaseModel):
    """Response model for login with user data."""
    access_token: str
    token_type: str
    profile: UserView


@router.post("/login", response_model=LoginResponse)
def login_with_json(login_data: LoginRequest, service: AuthenticationService = Depends(get_auth_service)):
    """
    Login endpoint that accepts JSON (email + password) and returns the user profile.
    """
    try:
        result = service.login(login_data.email, login_data.password)
    except Exception as e:
        raise handle_service_exception(e)
    return {"access_token": result.token, "token_type": "bearer", "profile": result.profile}


@router.post("/token")
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    service: AuthenticationService = Depends(get_auth_service),
):
    """
    OAuth2 compatible token endpoint (form-data).
    Used by Swagger UI and OAuth2 clients; el campo `username` lleva el email.
    """
    try:
        result = service.login(form_data.username, form_data.password)
    except Exception as e:
        raise handle_service_exception(e)
    return {"access_token": result.token, "token_type": "bearer"}


@router.post("/logout", response_model=AuthResult)
def logout(
    logout_data: LogoutRequest,
    authorization: Optional[str] = Header(None),
    service: AuthenticationService = Depends(get_auth_service),
):
    """Revoca el token enviado en el header Authorization."""
    try:
        return service.logout(logout_data.email, authorization)
    except Exception as e:
        raise handle_service_exception(e)
