"""
Service for Pet business logic.

Handles all business operations related to pets. Una mascota referencia el
perfil Owner por `owner_id`; la referencia se resuelve a través del User con
rol OWNER que apunta a ese perfil.
"""

from typing import Any, List, Optional
import logging

from services.base_service import BaseService, probe_value
from repositories.interfaces import PetRepository, UserRepository
from models.pets import Pet
from models.users import Role, User
from core.exceptions import (
    PetNotFoundError,
    PetAlreadyExistsError,
    PetValidationError,
    OwnerNotFoundError,
)
from core.validation import validate_or_raise

logger = logging.getLogger(__name__)


class PetService(BaseService[Pet, PetRepository]):
    """Service for managing pets."""

    not_found_error = PetNotFoundError

    def __init__(self, repository: PetRepository, user_repository: UserRepository):
        """
        Initialize pet service.

        Args:
            repository: PetRepository instance
            user_repository: UserRepository instance
        """
        super().__init__(repository)
        self.user_repository = user_repository

    def _owner_or_fail(self, owner_id: Optional[str]) -> User:
        """
        Resuelve el perfil Owner referenciado.

        Raises:
            OwnerNotFoundError: Si ningún User OWNER referencia ese perfil
        """
        user = self.user_repository.find_one_by_owner_id(owner_id) if owner_id else None
        if user is None or user.role != Role.OWNER:
            raise OwnerNotFoundError(owner_id)
        return user

    def get_all(self) -> List[Pet]:
        return self.repository.find_all()

    def get_one_by_id(self, id: str) -> Pet:
        """
        Raises:
            PetNotFoundError: If pet is not found
        """
        return self.get_by_id_or_fail(id)

    def get_by_owner(self, owner_id: str) -> List[Pet]:
        """
        Get all pets of an owner.

        Raises:
            OwnerNotFoundError: If the owner profile does not exist
        """
        self._owner_or_fail(owner_id)
        return self.repository.find_all_by_owner(owner_id)

    def create(self, candidate: Any) -> Pet:
        """
        Create a new pet.

        Se comprueba primero que no exista una mascota con el mismo nombre y
        raza para el mismo propietario, después los campos y por último la
        referencia al propietario.

        Raises:
            PetAlreadyExistsError: If the owner already has that pet
            PetValidationError: If the payload breaks the rules
            OwnerNotFoundError: If the referenced owner does not exist
        """
        payload = self.as_payload(candidate)
        existing = self.repository.find_one_by_natural_key(
            probe_value(payload.get("name")),
            probe_value(payload.get("breed")),
            probe_value(payload.get("owner_id", payload.get("ownerID"))),
        )
        if existing is not None:
            raise PetAlreadyExistsError(field="name", value=existing.name)

        data = validate_or_raise(payload, "pet", PetValidationError)
        self._owner_or_fail(data["owner_id"])

        pet = self.repository.save(Pet(**data))
        self.commit()

        logger.info(f"Pet {pet.id} ({pet.name}) created for owner {pet.owner_id}")
        return pet

    def update(self, candidate: Any) -> Pet:
        """
        Update an existing pet.

        Raises:
            PetNotFoundError: If pet is not found
            PetValidationError: If the payload breaks the rules
            OwnerNotFoundError: If the referenced owner does not exist
            PetAlreadyExistsError: If another pet of the owner has the same name and breed
        """
        payload = self.as_payload(candidate)
        existing = self.get_by_id_or_fail(payload.get("id"))

        data = validate_or_raise(payload, "pet_update", PetValidationError)
        self._owner_or_fail(data["owner_id"])

        clash = self.repository.find_one_by_natural_key(data["name"], data["breed"], data["owner_id"])
        if clash is not None and clash.id != existing.id:
            raise PetAlreadyExistsError(field="name", value=clash.name)

        updated = self.repository.update(existing.id, Pet(**data))
        self.commit()

        logger.info(f"Pet {updated.id} updated")
        return updated

    def delete(self, id: str) -> Pet:
        """
        Delete a pet (hard delete).

        Returns:
            The pet as it was before deletion

        Raises:
            PetNotFoundError: If pet is not found
        """
        pet = self.get_by_id_or_fail(id)
        self.repository.delete(pet.id)
        self.commit()

        logger.info(f"Pet {pet.id} deleted")
        return pet
