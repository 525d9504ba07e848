"""
Service for User business logic.

Gestión administrativa de usuarios. Las contraseñas se almacenan siempre
como hash y nunca se devuelven: todas las operaciones devuelven `UserView`.
"""

from typing import Any, List, Optional
import logging

from services.base_service import (
    BaseService,
    default_password_hasher,
    ensure_identity_available,
    probe_value,
)
from repositories.interfaces import OwnerRepository, UserRepository, VetRepository
from models.users import Role, User, UserView
from core.exceptions import (
    UserNotFoundError,
    UserAlreadyExistsError,
    UserValidationError,
    OwnerNotFoundError,
    VetNotFoundError,
)
from core.security import PasswordHasher
from core.utils import role_from_storage
from core.validation import validate_or_raise

logger = logging.getLogger(__name__)


class UserService(BaseService[User, UserRepository]):
    """Service for managing users."""

    not_found_error = UserNotFoundError

    def __init__(
        self,
        repository: UserRepository,
        owner_repository: OwnerRepository,
        vet_repository: VetRepository,
        password_hasher: Optional[PasswordHasher] = None,
    ):
        """
        Initialize user service.

        Args:
            repository: UserRepository instance
            owner_repository: OwnerRepository para validar la referencia ownerID
            vet_repository: VetRepository para validar la referencia vetID
            password_hasher: PasswordHasher instance (PBKDF2 by default)
        """
        super().__init__(repository)
        self.owner_repository = owner_repository
        self.vet_repository = vet_repository
        self.password_hasher = password_hasher or default_password_hasher()

    def _check_profile_reference(self, data: dict, exclude_id: Optional[str] = None) -> None:
        """
        Un perfil Owner/Vet debe existir y pertenecer a un único User.

        Raises:
            OwnerNotFoundError / VetNotFoundError: Si el perfil referenciado no existe
            UserAlreadyExistsError: Si otro usuario ya tiene asignado ese perfil
        """
        role = role_from_storage(data["role"])
        if role == Role.OWNER:
            profile_id = data["owner_id"]
            if self.owner_repository.find_one_by_id(profile_id) is None:
                raise OwnerNotFoundError(profile_id)
            holder = self.repository.find_one_by_owner_id(profile_id)
        elif role == Role.VET:
            profile_id = data["vet_id"]
            if self.vet_repository.find_one_by_id(profile_id) is None:
                raise VetNotFoundError(profile_id)
            holder = self.repository.find_one_by_vet_id(profile_id)
        else:
            return

        if holder is not None and holder.id != exclude_id:
            raise UserAlreadyExistsError(field=f"{role.value.lower()}_id", value=profile_id)

    def get_all(self) -> List[UserView]:
        return [UserView.from_user(user) for user in self.repository.find_all()]

    def get_one_by_id(self, id: str) -> UserView:
        """
        Raises:
            UserNotFoundError: If user is not found
        """
        return UserView.from_user(self.get_by_id_or_fail(id))

    def create(self, candidate: Any) -> UserView:
        """
        Create a new user.

        Args:
            candidate: Campos del usuario (name, email, username, password, role, ownerID/vetID)

        Returns:
            The created user without password

        Raises:
            UserAlreadyExistsError: If email or username is already taken
            UserValidationError: If the payload breaks the rules
            OwnerNotFoundError / VetNotFoundError: If the referenced profile does not exist
        """
        payload = self.as_payload(candidate)
        email = probe_value(payload.get("email"))
        username = probe_value(payload.get("username"))
        if self.repository.find_one_by_email_or_username(email, username) is not None:
            raise UserAlreadyExistsError()

        data = validate_or_raise(payload, "user", UserValidationError)
        self._check_profile_reference(data)
        user = self.repository.save(User(
            name=data["name"],
            username=data["username"],
            email=data["email"],
            password_hash=self.password_hasher.hash(data["password"]),
            role=role_from_storage(data["role"]),
            owner_id=data.get("owner_id"),
            vet_id=data.get("vet_id"),
        ))
        self.commit()

        logger.info(f"User {user.id} ({user.username}) created with role {user.role.value}")
        return UserView.from_user(user)

    def update(self, candidate: Any) -> UserView:
        """
        Update an existing user.

        If the candidate has no password, the stored hash is kept.

        Raises:
            UserNotFoundError: If user is not found
            UserValidationError: If the payload breaks the rules
            UserAlreadyExistsError: If email or username belongs to another user
            OwnerNotFoundError / VetNotFoundError: If the referenced profile does not exist
        """
        payload = self.as_payload(candidate)
        existing = self.get_by_id_or_fail(payload.get("id"))

        data = validate_or_raise(payload, "user_update", UserValidationError)
        ensure_identity_available(
            self.repository,
            data["email"],
            data["username"],
            UserAlreadyExistsError,
            exclude_id=existing.id,
        )
        self._check_profile_reference(data, exclude_id=existing.id)

        password_hash = (
            self.password_hasher.hash(data["password"]) if data.get("password") else existing.password_hash
        )
        updated = self.repository.update(existing.id, User(
            id=existing.id,
            name=data["name"],
            username=data["username"],
            email=data["email"],
            password_hash=password_hash,
            role=role_from_storage(data["role"]),
            owner_id=data.get("owner_id"),
            vet_id=data.get("vet_id"),
        ))
        self.commit()

        logger.info(f"User {updated.id} updated")
        return UserView.from_user(updated)

    def delete(self, id: str) -> UserView:
        """
        Delete a user (hard delete) together with its Owner/Vet profile.

        Returns:
            The user as it was before deletion

        Raises:
            UserNotFoundError: If user is not found
        """
        user = self.get_by_id_or_fail(id)
        self.repository.delete(user.id)

        if user.owner_id and self.owner_repository.find_one_by_id(user.owner_id) is not None:
            self.owner_repository.delete(user.owner_id)
        if user.vet_id and self.vet_repository.find_one_by_id(user.vet_id) is not None:
            self.vet_repository.delete(user.vet_id)
        self.commit(self.owner_repository, self.vet_repository)

        logger.info(f"User {user.id} deleted")
        return UserView.from_user(user)
