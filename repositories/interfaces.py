"""
Puertos de repositorio (interfaces abstractas).

Los servicios dependen únicamente de estas interfaces; la implementación
concreta (SQLAlchemy) se inyecta al arrancar el proceso. La ausencia de un
registro se representa con None, nunca con una excepción. Cualquier fallo del
almacén se propaga como DatabaseException.

El almacén es quien debe garantizar la unicidad de email/username
(restricción UNIQUE): la comprobación previa de los servicios no es atómica.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Generic, List, Optional, TypeVar

from models.users import User, Role
from models.profiles import Owner, Vet
from models.pets import Pet

E = TypeVar("E")


class Repository(ABC, Generic[E]):
    """Contrato CRUD común a todas las entidades."""

    @abstractmethod
    def find_all(self) -> List[E]:
        pass

    @abstractmethod
    def find_one_by_id(self, id: str) -> Optional[E]:
        pass

    @abstractmethod
    def save(self, entity: E) -> E:
        pass

    @abstractmethod
    def update(self, id: str, entity: E) -> E:
        pass

    @abstractmethod
    def delete(self, id: str) -> E:
        pass

    @abstractmethod
    def commit(self) -> None:
        pass

    @abstractmethod
    def rollback(self) -> None:
        pass


class UserRepository(Repository[User]):

    @abstractmethod
    def find_one_by_email(self, email: str) -> Optional[User]:
        pass

    @abstractmethod
    def find_one_by_username(self, username: str) -> Optional[User]:
        pass

    @abstractmethod
    def find_one_by_email_or_username(self, email: str, username: str) -> Optional[User]:
        """Coincidencia por email primero y, si no hay, por username."""
        pass

    @abstractmethod
    def find_all_by_role(self, role: Role) -> List[User]:
        pass

    @abstractmethod
    def find_one_by_owner_id(self, owner_id: str) -> Optional[User]:
        pass

    @abstractmethod
    def find_one_by_vet_id(self, vet_id: str) -> Optional[User]:
        pass


class OwnerRepository(Repository[Owner]):

    @abstractmethod
    def find_one_by_email_or_username(self, email: str, username: str) -> Optional[Owner]:
        pass


class VetRepository(Repository[Vet]):

    @abstractmethod
    def find_one_by_email_or_username(self, email: str, username: str) -> Optional[Vet]:
        pass


class PetRepository(Repository[Pet]):

    @abstractmethod
    def find_one_by_natural_key(self, name: str, breed: str, owner_id: str) -> Optional[Pet]:
        """Sonda de unicidad: misma mascota (nombre + raza) bajo el mismo propietario."""
        pass

    @abstractmethod
    def find_all_by_owner(self, owner_id: str) -> List[Pet]:
        pass


class RevokedTokenRepository(ABC):
    """Lista de revocación de tokens (logout)."""

    @abstractmethod
    def add(self, jti: str, user_id: str, expires_at: datetime) -> None:
        pass

    @abstractmethod
    def contains(self, jti: str) -> bool:
        pass

    @abstractmethod
    def purge_expired(self, now: datetime) -> int:
        pass

    @abstractmethod
    def commit(self) -> None:
        pass
