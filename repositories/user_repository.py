"""
Repositorio para la entidad User.
Gestiona todas las operaciones de base de datos relacionadas con los usuarios.
"""

from typing import Any, Dict, List, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from repositories.base_repository import BaseRepository
from repositories.interfaces import UserRepository
from database.models import UserORM
from models.users import User, Role
from core.utils import role_to_storage, role_from_storage
import logging

logger = logging.getLogger(__name__)


class SQLAlchemyUserRepository(BaseRepository[UserORM, User], UserRepository):
    """Repositorio para la gestión de entidades de usuario."""

    entity_name = "User"

    def __init__(self, db: Session):
        """
        Inicializa el repositorio de usuarios.

        Args:
            db: SQLAlchemy session
        """
        super().__init__(db, UserORM)

    def _to_entity(self, row: UserORM) -> User:
        return User(
            id=row.id,
            name=row.name,
            username=row.username,
            email=row.email,
            password_hash=row.password_hash,
            role=role_from_storage(row.role),
            owner_id=row.owner_id,
            vet_id=row.vet_id,
        )

    def _to_columns(self, entity: User) -> Dict[str, Any]:
        return {
            "id": entity.id,
            "name": entity.name,
            "username": entity.username,
            "email": entity.email,
            "password_hash": entity.password_hash,
            "role": role_to_storage(entity.role),
            "owner_id": entity.owner_id,
            "vet_id": entity.vet_id,
        }

    def find_one_by_email(self, email: str) -> Optional[User]:
        """
        Busca un usuario por email.

        Returns:
            User o None si no se encuentra
        """
        return self._find_one_by(email=email)

    def find_one_by_username(self, username: str) -> Optional[User]:
        """
        Busca un usuario por username.

        Returns:
            User o None si no se encuentra
        """
        return self._find_one_by(username=username)

    def find_one_by_email_or_username(self, email: str, username: str) -> Optional[User]:
        """
        Busca un usuario cuyo email o username coincida.

        Si hay dos usuarios distintos (uno por email y otro por username),
        se devuelve el que coincide por email.
        """
        try:
            rows = self.db.query(UserORM).filter(
                or_(UserORM.email == email, UserORM.username == username)
            ).all()
        except SQLAlchemyError as e:
            raise self._fail("buscar", e)
        by_email = [row for row in rows if row.email == email]
        match = by_email[0] if by_email else (rows[0] if rows else None)
        return self._to_entity_or_none(match)

    def find_all_by_role(self, role: Role) -> List[User]:
        """
        Busca todos los usuarios con un rol específico.

        Args:
            role: Rol a filtrar (ADMIN, OWNER, VET)

        Returns:
            Lista de usuarios con el rol especificado
        """
        try:
            rows = self.db.query(UserORM).filter(
                UserORM.role == role_to_storage(role)
            ).order_by(UserORM.username).all()
        except SQLAlchemyError as e:
            raise self._fail("listar", e)
        return [self._to_entity(row) for row in rows]

    def find_one_by_owner_id(self, owner_id: str) -> Optional[User]:
        return self._find_one_by(owner_id=owner_id)

    def find_one_by_vet_id(self, vet_id: str) -> Optional[User]:
        return self._find_one_by(vet_id=vet_id)
