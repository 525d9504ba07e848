"""
Utilidades de seguridad: capacidades de hash de contraseñas y emisión de tokens,
y comprobación de roles.

Los servicios dependen solo de las interfaces `PasswordHasher` y `TokenIssuer`;
las implementaciones concretas se inyectan al construirlos.
"""

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Any, Dict, Optional
import hashlib
import hmac
import os

from core.exceptions import ForbiddenException, UnauthorizedException


class TokenError(UnauthorizedException):
    """Token inválido, expirado o con claims que no coinciden."""

    def __init__(self, message: str = "Token inválido o expirado"):
        super().__init__(message=message)


class PasswordHasher(ABC):
    """Capacidad hash/verify para contraseñas."""

    @abstractmethod
    def hash(self, password: str) -> str:
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        pass


class TokenIssuer(ABC):
    """Capacidad issue/parse para tokens de autenticación firmados."""

    @abstractmethod
    def issue(self, subject: str, expires_delta: Optional[timedelta] = None, **claims: Any) -> str:
        pass

    @abstractmethod
    def parse(self, token: str) -> Dict[str, Any]:
        """Devuelve los claims validados o lanza TokenError."""
        pass


class Pbkdf2PasswordHasher(PasswordHasher):
    """PBKDF2-HMAC-SHA256. El resultado almacenado es "salt_hex$hash_hex"."""

    def __init__(self, iterations: int = 100_000):
        self.iterations = iterations

    def hash(self, password: str) -> str:
        salt = os.urandom(16)
        dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, self.iterations)
        return f"{salt.hex()}${dk.hex()}"

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            salt_hex, hash_hex = password_hash.split("$", 1)
            salt = bytes.fromhex(salt_hex)
        except (ValueError, AttributeError):
            return False
        dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, self.iterations)
        return hmac.compare_digest(dk.hex(), hash_hex)


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Extrae el token de un header "Authorization: Bearer <token>".

    Returns:
        El token, o None si el header falta o no tiene el formato esperado
    """
    if not authorization:
        return None
    parts = authorization.strip().split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1]


def require_role(user_role: str, *allowed_roles: str) -> None:
    """
    Check if user has one of the allowed roles.

    Args:
        user_role: Role of the current user
        allowed_roles: Tuple of allowed roles

    Raises:
        ForbiddenException: If user role is not in allowed roles
    """
    if user_role not in allowed_roles:
        raise ForbiddenException(
            message="Permisos insuficientes",
            details={
                "user_role": user_role,
                "required_roles": list(allowed_roles)
            }
        )
