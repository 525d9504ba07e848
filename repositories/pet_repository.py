"""
Repositorio para la entidad Pet.
Gestiona todas las operaciones de base de datos relacionadas con las mascotas.
"""

from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session

from repositories.base_repository import BaseRepository
from repositories.interfaces import PetRepository
from database.models import PetORM
from models.pets import Pet
from core.utils import pet_type_to_storage, pet_type_from_storage


class SQLAlchemyPetRepository(BaseRepository[PetORM, Pet], PetRepository):
    """Repositorio para la gestión de entidades de mascota."""

    entity_name = "Pet"

    def __init__(self, db: Session):
        """
        Inicializa el repositorio de mascotas.

        Args:
            db: SQLAlchemy session
        """
        super().__init__(db, PetORM)

    def _to_entity(self, row: PetORM) -> Pet:
        return Pet(
            id=row.id,
            name=row.name,
            breed=row.breed,
            color=row.color,
            age=row.age,
            weight=row.weight,
            type=pet_type_from_storage(row.type),
            owner_id=row.owner_id,
        )

    def _to_columns(self, entity: Pet) -> Dict[str, Any]:
        return {
            "id": entity.id,
            "name": entity.name,
            "breed": entity.breed,
            "color": entity.color,
            "age": entity.age,
            "weight": entity.weight,
            "type": pet_type_to_storage(entity.type),
            "owner_id": entity.owner_id,
        }

    def find_one_by_natural_key(self, name: str, breed: str, owner_id: str) -> Optional[Pet]:
        """
        Busca una mascota por nombre + raza bajo un propietario.

        Returns:
            Pet o None si no existe
        """
        return self._find_one_by(name=name, breed=breed, owner_id=owner_id)

    def find_all_by_owner(self, owner_id: str) -> List[Pet]:
        """
        Busca todas las mascotas de un propietario.

        Args:
            owner_id: ID del perfil Owner

        Returns:
            Lista de mascotas del propietario
        """
        return self._find_all_by(owner_id=owner_id)
