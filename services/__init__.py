"""
Capa de servicio para la lógica de negocio.
Este paquete contiene clases de servicio que implementan la lógica de negocio
y orquestan las operaciones entre repositorios.
"""

from .base_service import BaseService
from .profile_service import ProfileService
from .owner_service import OwnerService
from .vet_service import VetService
from .user_service import UserService
from .pet_service import PetService
from .auth_service import AuthenticationService

__all__ = [
    "BaseService",
    "ProfileService",
    "OwnerService",
    "VetService",
    "UserService",
    "PetService",
    "AuthenticationService",
]
