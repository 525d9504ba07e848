from .users import User, UserView, Role, AuthResult, LoginRequest, LogoutRequest
from .profiles import Owner, Vet, OwnerView, VetView
from .pets import Pet, PetType
from .common import (
    ErrorResponse,
    HealthCheckResponse,
    create_error_response,
)

__all__ = [
    # Usuarios
    "User", "UserView", "Role", "AuthResult", "LoginRequest", "LogoutRequest",
    # Perfiles
    "Owner", "Vet", "OwnerView", "VetView",
    # Mascotas
    "Pet", "PetType",
    # Common responses
    "ErrorResponse", "HealthCheckResponse", "create_error_response",
]
