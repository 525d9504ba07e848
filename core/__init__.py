""" Utilidades principales y componentes compartidos para la aplicación.

Este paquete contiene:

- Excepciones personalizadas
- Utilidades de seguridad (hash de contraseñas, tokens, roles)
- Mapeo de enums
- Motor de validación
"""

from .exceptions import (
    ErrorKind,
    AppException,
    NotFoundException,
    UnauthorizedException,
    ValidationException,
    DuplicateException,
    ForbiddenException,
    DatabaseException,
    UnknownError,
)
from .security import (
    PasswordHasher,
    TokenIssuer,
    TokenError,
    Pbkdf2PasswordHasher,
    extract_bearer_token,
    require_role,
)
from .utils import (
    enum_to_value,
    normalize_stored_enum,
    parse_enum,
    role_to_storage,
    role_from_storage,
    pet_type_to_storage,
    pet_type_from_storage,
)
from .validation import (
    Violation,
    ValidationOutcome,
    validate,
    validate_or_raise,
)

__all__ = [
    # Excepciones
    "ErrorKind",
    "AppException",
    "NotFoundException",
    "UnauthorizedException",
    "ValidationException",
    "DuplicateException",
    "ForbiddenException",
    "DatabaseException",
    "UnknownError",
    # seguridad
    "PasswordHasher",
    "TokenIssuer",
    "TokenError",
    "Pbkdf2PasswordHasher",
    "extract_bearer_token",
    "require_role",
    # utils
    "enum_to_value",
    "normalize_stored_enum",
    "parse_enum",
    "role_to_storage",
    "role_from_storage",
    "pet_type_to_storage",
    "pet_type_from_storage",
    # validación
    "Violation",
    "ValidationOutcome",
    "validate",
    "validate_or_raise",
]
