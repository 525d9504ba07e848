"""
Repositorio de la lista de revocación de tokens.
"""

from datetime import datetime
import logging

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from repositories.interfaces import RevokedTokenRepository
from database.models import RevokedTokenORM
from core.exceptions import DatabaseException

logger = logging.getLogger(__name__)


class SQLAlchemyRevokedTokenRepository(RevokedTokenRepository):
    """Persiste los `jti` revocados hasta su expiración."""

    def __init__(self, db: Session):
        self.db = db

    def add(self, jti: str, user_id: str, expires_at: datetime) -> None:
        try:
            if self.db.get(RevokedTokenORM, jti) is None:
                self.db.add(RevokedTokenORM(
                    jti=jti,
                    user_id=user_id,
                    expires_at=expires_at.replace(tzinfo=None),
                ))
                self.db.flush()
        except SQLAlchemyError as e:
            logger.error(f"Error revoking token {jti}: {e}")
            self.db.rollback()
            raise DatabaseException("Error al revocar el token")

    def contains(self, jti: str) -> bool:
        try:
            return self.db.get(RevokedTokenORM, jti) is not None
        except SQLAlchemyError as e:
            logger.error(f"Error checking revoked token {jti}: {e}")
            raise DatabaseException("Error al verificar el token")

    def purge_expired(self, now: datetime) -> int:
        """Elimina las entradas cuyo token ya expiró. Devuelve cuántas se borraron."""
        try:
            return self.db.query(RevokedTokenORM).filter(
                RevokedTokenORM.expires_at < now.replace(tzinfo=None)
            ).delete(synchronize_session=False)
        except SQLAlchemyError as e:
            logger.error(f"Error purging revoked tokens: {e}")
            self.db.rollback()
            raise DatabaseException("Error al limpiar tokens revocados")

    def commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error committing transaction: {e}")
            self.db.rollback()
            raise DatabaseException("Error al guardar cambios en la base de datos")
