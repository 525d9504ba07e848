"""
Servicio de autenticación: login y logout.

Los errores esperados (usuario inexistente, credenciales o token inválidos)
se propagan con su tipo. Cualquier otro fallo se registra y se relanza como
`UnknownError`, con la causa original encadenada.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
import logging

from config import settings
from repositories.interfaces import UserRepository, RevokedTokenRepository
from models.users import AuthResult, UserView
from core.exceptions import (
    NotFoundException,
    UnauthorizedException,
    UnknownError,
    UserNotFoundError,
    UserUnauthorizedError,
)
from core.security import PasswordHasher, TokenIssuer, TokenError, extract_bearer_token
from services.base_service import default_password_hasher

logger = logging.getLogger(__name__)


class AuthenticationService:
    """Service for login / logout."""

    def __init__(
        self,
        user_repository: UserRepository,
        token_issuer: TokenIssuer,
        password_hasher: Optional[PasswordHasher] = None,
        revoked_token_repository: Optional[RevokedTokenRepository] = None,
    ):
        """
        Args:
            user_repository: UserRepository instance
            token_issuer: Emisor de tokens firmados
            password_hasher: PasswordHasher instance (PBKDF2 by default)
            revoked_token_repository: Lista de revocación usada por logout
        """
        self.user_repository = user_repository
        self.token_issuer = token_issuer
        self.password_hasher = password_hasher or default_password_hasher()
        self.revoked_tokens = revoked_token_repository

    def login(self, email: str, password: str) -> AuthResult:
        """
        Autentica un usuario por email y contraseña.

        Returns:
            AuthResult con el token firmado (válido `jwt_access_minutes`) y el perfil sin contraseña

        Raises:
            UserNotFoundError: Si no existe un usuario con ese email
            UserUnauthorizedError: Si la contraseña no coincide
            UnknownError: Ante cualquier otro fallo
        """
        try:
            user = self.user_repository.find_one_by_email(email)
            if user is None:
                logger.info(f"Login attempt for unknown email {email}")
                raise UserNotFoundError(email)

            if not self.password_hasher.verify(password, user.password_hash):
                logger.info(f"Login attempt with wrong password for user {user.id}")
                raise UserUnauthorizedError()

            token = self.token_issuer.issue(
                user.id,
                expires_delta=timedelta(minutes=settings.jwt_access_minutes),
                role=user.role.value,
            )
            logger.info(f"User {user.id} logged in")
            return AuthResult(token=token, profile=UserView.from_user(user))
        except (NotFoundException, UnauthorizedException):
            raise
        except Exception as e:
            logger.error(f"Unexpected error during login: {e}", exc_info=True)
            raise UnknownError() from e

    def logout(self, email: str, authorization: Optional[str]) -> AuthResult:
        """
        Cierra la sesión revocando el token presentado.

        Args:
            email: Email del usuario que cierra sesión
            authorization: Header "Bearer <token>" del token a revocar

        Returns:
            AuthResult vacío (token y perfil None)

        Raises:
            UserNotFoundError: Si no existe un usuario con ese email
            UserUnauthorizedError: Si falta el token, es inválido o pertenece a otro usuario
            UnknownError: Ante cualquier otro fallo
        """
        try:
            user = self.user_repository.find_one_by_email(email)
            if user is None:
                raise UserNotFoundError(email)

            token = extract_bearer_token(authorization)
            if token is None:
                raise UserUnauthorizedError("Se requiere un token Bearer")

            try:
                claims = self.token_issuer.parse(token)
            except TokenError:
                raise UserUnauthorizedError("Token inválido o expirado")

            jti = claims.get("jti")
            if claims.get("sub") != user.id or not jti:
                raise UserUnauthorizedError("El token no pertenece a este usuario")

            if self.revoked_tokens is not None:
                now = datetime.now(timezone.utc)
                self.revoked_tokens.purge_expired(now)
                expires_at = datetime.fromtimestamp(claims["exp"], tz=timezone.utc)
                self.revoked_tokens.add(jti, user.id, expires_at)
                self.revoked_tokens.commit()

            logger.info(f"User {user.id} logged out")
            return AuthResult()
        except (NotFoundException, UnauthorizedException):
            raise
        except Exception as e:
            logger.error(f"Unexpected error during logout: {e}", exc_info=True)
            raise UnknownError() from e

    def is_revoked(self, claims: Dict[str, Any]) -> bool:
        """Indica si el token con estos claims fue revocado por un logout."""
        jti = claims.get("jti")
        if not jti or self.revoked_tokens is None:
            return False
        return self.revoked_tokens.contains(jti)
