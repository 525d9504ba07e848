"""
Servicio base con operaciones de lógica de negocio comunes.
Esta clase proporciona una base para las clases de servicio que implementan
la lógica de negocio y coordinan las operaciones del repositorio.
"""

from typing import TypeVar, Generic, Any, Dict, Optional, Type
import logging

from config import settings
from repositories.interfaces import Repository, UserRepository
from core.exceptions import NotFoundException, DuplicateException
from core.security import PasswordHasher, Pbkdf2PasswordHasher

logger = logging.getLogger(__name__)

# Type variables
E = TypeVar('E')  # Entidad de dominio
R = TypeVar('R')  # Repository


def default_password_hasher() -> PasswordHasher:
    return Pbkdf2PasswordHasher(iterations=settings.pbkdf2_iterations)


def probe_value(value: Any) -> Any:
    """Normaliza un valor usado en una búsqueda previa a la validación.

    Un valor que no es texto no puede coincidir con ninguna fila y se busca como None.
    """
    return value.strip() if isinstance(value, str) else None


def ensure_identity_available(
    user_repository: UserRepository,
    email: str,
    username: str,
    error_cls: Type[DuplicateException],
    exclude_id: Optional[str] = None,
) -> None:
    """
    Verifica que email y username no pertenezcan a otro usuario.

    Args:
        user_repository: Repositorio de usuarios
        email: Email a comprobar
        username: Username a comprobar
        error_cls: Error a lanzar si hay conflicto
        exclude_id: ID de usuario que puede conservarlos (actualizaciones)

    Raises:
        DuplicateException: Si otro usuario ya usa el email o el username
    """
    by_email = user_repository.find_one_by_email(email)
    if by_email is not None and by_email.id != exclude_id:
        raise error_cls(field="email", value=email)
    by_username = user_repository.find_one_by_username(username)
    if by_username is not None and by_username.id != exclude_id:
        raise error_cls(field="username", value=username)


class BaseService(Generic[E, R]):
    """
    Servicio base que proporciona operaciones lógicas de negocio comunes.
    Esta clase debe ser heredada por servicios de entidades específicas.
    """

    not_found_error: Type[NotFoundException] = NotFoundException

    def __init__(self, repository: R):
        """
        Inicializa el servicio.

        Args:
            repository: The repository instance for data access
        """
        self.repository = repository

    def get_by_id(self, id: Optional[str]) -> Optional[E]:
        """
        Obtiene una entidad por su ID.

        Returns:
            The entity or None if not found
        """
        if not id:
            return None
        return self.repository.find_one_by_id(id)

    def get_by_id_or_fail(self, id: Optional[str]) -> E:
        """
        Obtiene una entidad por su ID o lanza una excepción si no se encuentra.

        Raises:
            NotFoundException: If entity is not found (subclase específica de la entidad)
        """
        entity = self.get_by_id(id)
        if entity is None:
            raise self.not_found_error(id)
        return entity

    def commit(self, *repositories: Repository) -> None:
        """Confirma la unidad de trabajo en el repositorio principal y en los indicados."""
        self.repository.commit()
        for repository in repositories:
            if repository is not self.repository:
                repository.commit()

    @staticmethod
    def as_payload(candidate: Any) -> Dict[str, Any]:
        """Convierte el candidato (dict o modelo pydantic) en un dict."""
        if candidate is None:
            return {}
        if hasattr(candidate, "model_dump"):
            return candidate.model_dump()
        return dict(candidate)
