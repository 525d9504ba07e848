"""
Lógica común de los perfiles de cuenta (Owner y Vet).

Un perfil siempre se crea, actualiza y elimina junto con el User emparejado
(rol del perfil + referencia al perfil). Las vistas devueltas se construyen a
partir del User y nunca incluyen la contraseña.
"""

from typing import Any, ClassVar, List, Optional, Type
import logging

from services.base_service import (
    BaseService,
    default_password_hasher,
    ensure_identity_available,
    probe_value,
)
from repositories.interfaces import UserRepository, Repository
from models.users import User, Role
from core.exceptions import NotFoundException, DuplicateException, ValidationException
from core.security import PasswordHasher
from core.validation import validate_or_raise

logger = logging.getLogger(__name__)


class ProfileService(BaseService[User, UserRepository]):
    """Servicio genérico para perfiles emparejados con un User."""

    role: ClassVar[Role]
    rule_set: ClassVar[str]
    profile_class: ClassVar[type]
    view_class: ClassVar[type]
    reference_field: ClassVar[str]
    already_exists_error: ClassVar[Type[DuplicateException]]
    validation_error: ClassVar[Type[ValidationException]]
    not_found_error: Type[NotFoundException]

    def __init__(
        self,
        repository: Repository,
        user_repository: UserRepository,
        password_hasher: Optional[PasswordHasher] = None,
    ):
        """
        Args:
            repository: Repositorio de perfiles (Owner o Vet)
            user_repository: Repositorio de usuarios
            password_hasher: Capacidad de hash (PBKDF2 por defecto)
        """
        super().__init__(user_repository)
        self.profile_repository = repository
        self.password_hasher = password_hasher or default_password_hasher()

    def _user_or_fail(self, id: Optional[str]) -> User:
        user = self.get_by_id(id)
        if user is None or user.role != self.role:
            raise self.not_found_error(id)
        return user

    def _view(self, user: User):
        return self.view_class.from_user(user)

    def get_all(self) -> List[Any]:
        """Devuelve todos los usuarios con el rol del perfil, sin contraseña."""
        return [self._view(user) for user in self.repository.find_all_by_role(self.role)]

    def get_one_by_id(self, id: str):
        """
        Raises:
            NotFoundException: Si no hay un usuario con ese id y el rol del perfil
        """
        return self._view(self._user_or_fail(id))

    def create(self, candidate: Any):
        """
        Crea el perfil y su User emparejado.

        La comprobación de unicidad se hace antes que la validación de campos:
        un payload duplicado recibe el error de duplicado aunque sea inválido.

        Raises:
            DuplicateException: Si el email o el username ya están en uso
            ValidationException: Si los campos no cumplen las reglas
        """
        payload = self.as_payload(candidate)
        email = probe_value(payload.get("email"))
        username = probe_value(payload.get("username"))
        if self.repository.find_one_by_email_or_username(email, username) is not None:
            raise self.already_exists_error()

        data = validate_or_raise(payload, self.rule_set, self.validation_error)
        password_hash = self.password_hasher.hash(data["password"])

        profile = self.profile_repository.save(self.profile_class(
            name=data["name"],
            email=data["email"],
            username=data["username"],
            password_hash=password_hash,
        ))
        user = self.repository.save(User(
            name=data["name"],
            username=data["username"],
            email=data["email"],
            password_hash=password_hash,
            role=self.role,
            **{self.reference_field: profile.id},
        ))
        self.commit(self.profile_repository)

        logger.info(f"{self.role.value} {user.id} ({user.username}) created")
        return self._view(user)

    def update(self, candidate: Any):
        """
        Actualiza el perfil y su User emparejado.

        Raises:
            NotFoundException: Si el id no corresponde a un usuario del perfil
            ValidationException: Si los campos no cumplen las reglas
            DuplicateException: Si el email o username pertenecen a otro usuario
        """
        payload = self.as_payload(candidate)
        user = self._user_or_fail(payload.get("id"))

        data = validate_or_raise(payload, f"{self.rule_set}_update", self.validation_error)
        ensure_identity_available(
            self.repository,
            data["email"],
            data["username"],
            self.already_exists_error,
            exclude_id=user.id,
        )

        password_hash = (
            self.password_hasher.hash(data["password"]) if data.get("password") else user.password_hash
        )
        profile_id = getattr(user, self.reference_field)
        profile = self.profile_class(
            id=profile_id,
            name=data["name"],
            email=data["email"],
            username=data["username"],
            password_hash=password_hash,
        )
        if profile_id and self.profile_repository.find_one_by_id(profile_id) is not None:
            self.profile_repository.update(profile_id, profile)
        else:
            profile = self.profile_repository.save(profile)
            logger.warning(f"{self.role.value} {user.id} had no profile; a new one was created")

        updated = self.repository.update(user.id, user.model_copy(update={
            "name": data["name"],
            "email": data["email"],
            "username": data["username"],
            "password_hash": password_hash,
            self.reference_field: profile.id,
        }))
        self.commit(self.profile_repository)

        logger.info(f"{self.role.value} {updated.id} updated")
        return self._view(updated)

    def delete(self, id: str):
        """
        Elimina físicamente el User y su perfil.

        Returns:
            La vista del perfil tal como estaba antes de eliminarlo

        Raises:
            NotFoundException: Si el id no corresponde a un usuario del perfil
        """
        user = self._user_or_fail(id)
        self.repository.delete(user.id)

        profile_id = getattr(user, self.reference_field)
        if profile_id and self.profile_repository.find_one_by_id(profile_id) is not None:
            self.profile_repository.delete(profile_id)
        self.commit(self.profile_repository)

        logger.info(f"{self.role.value} {user.id} deleted")
        return self._view(user)
