"""
Repositorio base con operaciones CRUD comunes sobre SQLAlchemy:
Este adaptador genérico implementa el contrato `Repository` y convierte entre
filas ORM y las entidades de valor inmutables del dominio.
"""

from abc import abstractmethod
from typing import TypeVar, Generic, List, Optional, Type, Any, Dict
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
import logging

from core.exceptions import NotFoundException, DatabaseException

logger = logging.getLogger(__name__)

T = TypeVar('T')  # ORM Model
E = TypeVar('E')  # Entidad de dominio


class BaseRepository(Generic[T, E]):
    """
    Repositorio genérico proporciona operaciones CRUD estándar

    Esta clase debe ser heredada por repositorios de entidades específicos,
    que definen `_to_entity` y `_to_columns`.
    """

    entity_name: str = "Entidad"

    def __init__(self, db: Session, model_class: Type[T]):
        """
        Inicializa el repositorio.

        Args:
            db: Sesión SQLAlchemy
            model_class: Clase del modelo ORM para este repositorio
        """
        self.db = db
        self.model_class = model_class

    @abstractmethod
    def _to_entity(self, row: T) -> E:
        pass

    @abstractmethod
    def _to_columns(self, entity: E) -> Dict[str, Any]:
        pass

    def _to_entity_or_none(self, row: Optional[T]) -> Optional[E]:
        return self._to_entity(row) if row is not None else None

    def _fail(self, action: str, error: Exception) -> DatabaseException:
        logger.error(f"Error {action} {self.entity_name}: {error}")
        self.db.rollback()
        return DatabaseException(f"Error al {action} {self.entity_name}")

    def _get_row(self, id: str) -> Optional[T]:
        try:
            return self.db.get(self.model_class, str(id))
        except SQLAlchemyError as e:
            raise self._fail("obtener", e)

    def _get_row_or_fail(self, id: str) -> T:
        row = self._get_row(id)
        if row is None:
            raise NotFoundException(resource=self.entity_name, identifier=str(id))
        return row

    def find_all(self) -> List[E]:
        """
        Obtiene todas las entidades.

        Returns:
            Lista de entidades (vacía si no hay ninguna)
        """
        try:
            rows = self.db.query(self.model_class).all()
        except SQLAlchemyError as e:
            raise self._fail("listar", e)
        return [self._to_entity(row) for row in rows]

    def find_one_by_id(self, id: str) -> Optional[E]:
        """
        Obtiene una entidad por su ID.

        Args:
            id: ID de la entidad

        Returns:
            La entidad o None si no se encuentra
        """
        return self._to_entity_or_none(self._get_row(id))

    def _find_one_by(self, **filters) -> Optional[E]:
        try:
            row = self.db.query(self.model_class).filter_by(**filters).first()
        except SQLAlchemyError as e:
            raise self._fail("buscar", e)
        return self._to_entity_or_none(row)

    def _find_all_by(self, **filters) -> List[E]:
        try:
            rows = self.db.query(self.model_class).filter_by(**filters).all()
        except SQLAlchemyError as e:
            raise self._fail("listar", e)
        return [self._to_entity(row) for row in rows]

    def save(self, entity: E) -> E:
        """
        Crea una nueva entidad.

        Args:
            entity: La entidad a crear (sin id: se genera uno)

        Returns:
            La entidad creada, con su id
        """
        columns = self._to_columns(entity)
        if columns.get("id") is None:
            columns.pop("id", None)
        try:
            row = self.model_class(**columns)
            self.db.add(row)
            self.db.flush()
            self.db.refresh(row)
        except SQLAlchemyError as e:
            raise self._fail("crear", e)
        return self._to_entity(row)

    def update(self, id: str, entity: E) -> E:
        """
        Actualiza una entidad existente.

        Args:
            id: ID de la entidad
            entity: Nuevos valores

        Returns:
            La entidad actualizada

        Raises:
            NotFoundException: Si la entidad no existe
        """
        row = self._get_row_or_fail(id)
        columns = self._to_columns(entity)
        columns.pop("id", None)
        try:
            for field, value in columns.items():
                setattr(row, field, value)
            self.db.flush()
            self.db.refresh(row)
        except SQLAlchemyError as e:
            raise self._fail("actualizar", e)
        return self._to_entity(row)

    def delete(self, id: str) -> E:
        """
        Elimina físicamente una entidad.

        Args:
            id: ID de la entidad

        Returns:
            La entidad tal como estaba antes de eliminarla

        Raises:
            NotFoundException: Si la entidad no existe
        """
        row = self._get_row_or_fail(id)
        deleted = self._to_entity(row)
        try:
            self.db.delete(row)
            self.db.flush()
        except SQLAlchemyError as e:
            raise self._fail("eliminar", e)
        return deleted

    def commit(self) -> None:
        """Realiza el commit de la transacción actual."""
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error committing transaction: {e}")
            self.db.rollback()
            raise DatabaseException("Error al guardar cambios en la base de datos")

    def rollback(self) -> None:
        """Realiza el rollback de la transacción actual."""
        self.db.rollback()
