import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import jwt, JWTError, ExpiredSignatureError
from fastapi.security import OAuth2PasswordBearer
from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from database.db import get_db
from config import settings
from core.exceptions import ForbiddenException
from core.security import TokenIssuer, TokenError, require_role
from models.users import User
from repositories.user_repository import SQLAlchemyUserRepository
from repositories.token_repository import SQLAlchemyRevokedTokenRepository

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/token")


class JWTTokenIssuer(TokenIssuer):
    """Emisor de JWT firmados con los claims estándar (sub, jti, iat, exp, iss, aud)."""

    def __init__(
        self,
        secret_key: Optional[str] = None,
        algorithm: Optional[str] = None,
        issuer: Optional[str] = None,
        audience: Optional[str] = None,
    ):
        self.secret_key = secret_key or settings.jwt_secret_key
        self.algorithm = algorithm or settings.jwt_algorithm
        self.issuer = issuer or settings.jwt_issuer
        self.audience = audience or settings.jwt_audience

    def issue(self, subject: str, expires_delta: Optional[timedelta] = None, **claims: Any) -> str:
        if not subject:
            raise ValueError("A token needs a subject (user id)")
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(minutes=settings.jwt_access_minutes))
        to_encode = dict(claims)
        to_encode.update({
            "sub": str(subject),
            "jti": uuid.uuid4().hex,
            "iat": now,
            "exp": expire,
            "iss": self.issuer,
            "aud": self.audience,
        })
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def parse(self, token: str) -> Dict[str, Any]:
        """Valida firma, expiración, emisor y audiencia."""
        try:
            return jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                audience=self.audience,
            )
        except ExpiredSignatureError:
            logger.info("Token expirado")
            raise TokenError("Token expirado")
        except JWTError as e:
            logger.info(f"Token inválido o claim mismatch: {e}")
            raise TokenError()


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create a JWT access token including standard claims (sub, jti, iat, exp, iss, aud).

    `data` should include an identifier under the "sub" key (user id).
    """
    to_encode = data.copy()
    if "sub" not in to_encode:
        raise ValueError("`data` must include `sub` (subject / user id)")
    subject = to_encode.pop("sub")
    return JWTTokenIssuer().issue(subject, expires_delta, **to_encode)


def decode_token(token: str) -> dict:
    """Decode and validate a JWT token.

    Raises HTTPException(401) for any invalid token state.
    """
    try:
        return JWTTokenIssuer().parse(token)
    except TokenError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)


def get_current_user_dep(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> User:
    payload = decode_token(token)
    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token inválido: sub faltante")
    jti = payload.get("jti")
    if jti and SQLAlchemyRevokedTokenRepository(db).contains(jti):
        logger.info(f"Revoked token presented for user {user_id}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token revocado")
    user = SQLAlchemyUserRepository(db).find_one_by_id(str(user_id))
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Usuario no encontrado")
    return user


def require_roles(*allowed_roles):
    """Dependency factory that ensures the current user has one of the allowed roles.

    Usage in route: current_user = Depends(require_roles(Role.ADMIN, Role.VET))
    """

    def _dependency(current_user: User = Depends(get_current_user_dep)) -> User:
        try:
            require_role(current_user.role, *allowed_roles)
        except ForbiddenException as e:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=e.message)
        return current_user

    return _dependency
