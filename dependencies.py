"""
Dependency injection for services and repositories.

This module provides FastAPI dependencies for injecting services
and repositories into route handlers. Todos los repositorios de una petición
comparten la misma sesión, de modo que un commit confirma toda la operación.
"""

from sqlalchemy.orm import Session
from fastapi import Depends

from database.db import get_db
from auth import JWTTokenIssuer
from core.security import PasswordHasher, TokenIssuer
from repositories.user_repository import SQLAlchemyUserRepository
from repositories.profile_repository import SQLAlchemyOwnerRepository, SQLAlchemyVetRepository
from repositories.pet_repository import SQLAlchemyPetRepository
from repositories.token_repository import SQLAlchemyRevokedTokenRepository
from services.base_service import default_password_hasher
from services.owner_service import OwnerService
from services.vet_service import VetService
from services.user_service import UserService
from services.pet_service import PetService
from services.auth_service import AuthenticationService


# ==================== Capabilities ====================

def get_password_hasher() -> PasswordHasher:
    return default_password_hasher()


def get_token_issuer() -> TokenIssuer:
    return JWTTokenIssuer()


# ==================== Repository Dependencies ====================

def get_user_repository(db: Session = Depends(get_db)) -> SQLAlchemyUserRepository:
    return SQLAlchemyUserRepository(db)


def get_owner_repository(db: Session = Depends(get_db)) -> SQLAlchemyOwnerRepository:
    return SQLAlchemyOwnerRepository(db)


def get_vet_repository(db: Session = Depends(get_db)) -> SQLAlchemyVetRepository:
    return SQLAlchemyVetRepository(db)


def get_pet_repository(db: Session = Depends(get_db)) -> SQLAlchemyPetRepository:
    return SQLAlchemyPetRepository(db)


def get_revoked_token_repository(db: Session = Depends(get_db)) -> SQLAlchemyRevokedTokenRepository:
    return SQLAlchemyRevokedTokenRepository(db)


# ==================== Service Dependencies ====================

def get_owner_service(
    repository: SQLAlchemyOwnerRepository = Depends(get_owner_repository),
    user_repository: SQLAlchemyUserRepository = Depends(get_user_repository),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> OwnerService:
    """
    Get OwnerService instance.

    Example:
        ```python
        @router.get("/owners")
        def get_owners(service: OwnerService = Depends(get_owner_service)):
            return service.get_all()
        ```
    """
    return OwnerService(repository, user_repository, password_hasher)


def get_vet_service(
    repository: SQLAlchemyVetRepository = Depends(get_vet_repository),
    user_repository: SQLAlchemyUserRepository = Depends(get_user_repository),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> VetService:
    return VetService(repository, user_repository, password_hasher)


def get_user_service(
    repository: SQLAlchemyUserRepository = Depends(get_user_repository),
    owner_repository: SQLAlchemyOwnerRepository = Depends(get_owner_repository),
    vet_repository: SQLAlchemyVetRepository = Depends(get_vet_repository),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> UserService:
    return UserService(repository, owner_repository, vet_repository, password_hasher)


def get_pet_service(
    repository: SQLAlchemyPetRepository = Depends(get_pet_repository),
    user_repository: SQLAlchemyUserRepository = Depends(get_user_repository),
) -> PetService:
    return PetService(repository, user_repository)


def get_auth_service(
    user_repository: SQLAlchemyUserRepository = Depends(get_user_repository),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    revoked_token_repository: SQLAlchemyRevokedTokenRepository = Depends(get_revoked_token_repository),
) -> AuthenticationService:
    return AuthenticationService(user_repository, token_issuer, password_hasher, revoked_token_repository)
