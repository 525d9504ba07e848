"""
Repositorios para los perfiles Owner y Vet.
Ambos perfiles comparten la misma forma, así que comparten la implementación.
"""

from typing import Any, Dict, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from repositories.base_repository import BaseRepository
from repositories.interfaces import OwnerRepository, VetRepository
from database.models import OwnerORM, VetORM
from models.profiles import Owner, Vet


class _ProfileRepositoryMixin:
    """Conversión y búsqueda comunes para tablas de perfil."""

    entity_class = None

    def _to_entity(self, row):
        return self.entity_class(
            id=row.id,
            name=row.name,
            email=row.email,
            username=row.username,
            password_hash=row.password_hash,
        )

    def _to_columns(self, entity) -> Dict[str, Any]:
        return {
            "id": entity.id,
            "name": entity.name,
            "email": entity.email,
            "username": entity.username,
            "password_hash": entity.password_hash,
        }

    def find_one_by_email_or_username(self, email: str, username: str):
        try:
            row = self.db.query(self.model_class).filter(
                or_(self.model_class.email == email, self.model_class.username == username)
            ).first()
        except SQLAlchemyError as e:
            raise self._fail("buscar", e)
        return self._to_entity_or_none(row)


class SQLAlchemyOwnerRepository(_ProfileRepositoryMixin, BaseRepository[OwnerORM, Owner], OwnerRepository):
    """Repositorio para la gestión de perfiles de propietario."""

    entity_name = "Owner"
    entity_class = Owner

    def __init__(self, db: Session):
        super().__init__(db, OwnerORM)


class SQLAlchemyVetRepository(_ProfileRepositoryMixin, BaseRepository[VetORM, Vet], VetRepository):
    """Repositorio para la gestión de perfiles de veterinario."""

    entity_name = "Vet"
    entity_class = Vet

    def __init__(self, db: Session):
        super().__init__(db, VetORM)
