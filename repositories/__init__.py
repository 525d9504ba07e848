"""
Capa de repositorio para el acceso a datos.
Este paquete contiene los puertos (interfaces) y sus adaptadores SQLAlchemy.
Los repositorios proporcionan una abstracción sobre el ORM y no deben contener
lógica de negocio.

"""

from .interfaces import (
    Repository,
    UserRepository,
    OwnerRepository,
    VetRepository,
    PetRepository,
    RevokedTokenRepository,
)
from .base_repository import BaseRepository
from .user_repository import SQLAlchemyUserRepository
from .profile_repository import SQLAlchemyOwnerRepository, SQLAlchemyVetRepository
from .pet_repository import SQLAlchemyPetRepository
from .token_repository import SQLAlchemyRevokedTokenRepository

__all__ = [
    "Repository",
    "UserRepository",
    "OwnerRepository",
    "VetRepository",
    "PetRepository",
    "RevokedTokenRepository",
    "BaseRepository",
    "SQLAlchemyUserRepository",
    "SQLAlchemyOwnerRepository",
    "SQLAlchemyVetRepository",
    "SQLAlchemyPetRepository",
    "SQLAlchemyRevokedTokenRepository",
]
