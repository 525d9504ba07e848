"""
Service for Owner business logic.

Los propietarios se registran sin autenticación: crear un Owner crea también
el User con rol OWNER que lo representa.
"""

from services.profile_service import ProfileService
from repositories.interfaces import OwnerRepository, UserRepository
from models.profiles import Owner, OwnerView
from models.users import Role
from core.exceptions import (
    OwnerNotFoundError,
    OwnerAlreadyExistsError,
    OwnerValidationError,
)


class OwnerService(ProfileService):
    """Service for managing owner profiles and their paired users."""

    role = Role.OWNER
    rule_set = "owner"
    profile_class = Owner
    view_class = OwnerView
    reference_field = "owner_id"
    not_found_error = OwnerNotFoundError
    already_exists_error = OwnerAlreadyExistsError
    validation_error = OwnerValidationError

    def __init__(self, repository: OwnerRepository, user_repository: UserRepository, password_hasher=None):
        """
        Initialize owner service.

        Args:
            repository: OwnerRepository instance
            user_repository: UserRepository instance
            password_hasher: PasswordHasher instance (PBKDF2 by default)
        """
        super().__init__(repository, user_repository, password_hasher)
