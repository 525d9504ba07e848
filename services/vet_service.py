"""
Service for Vet business logic.
"""

from services.profile_service import ProfileService
from repositories.interfaces import VetRepository, UserRepository
from models.profiles import Vet, VetView
from models.users import Role
from core.exceptions import (
    VetNotFoundError,
    VetAlreadyExistsError,
    VetValidationError,
)


class VetService(ProfileService):
    """Service for managing vet profiles and their paired users."""

    role = Role.VET
    rule_set = "vet"
    profile_class = Vet
    view_class = VetView
    reference_field = "vet_id"
    not_found_error = VetNotFoundError
    already_exists_error = VetAlreadyExistsError
    validation_error = VetValidationError

    def __init__(self, repository: VetRepository, user_repository: UserRepository, password_hasher=None):
        super().__init__(repository, user_repository, password_hasher)
