"""
Excepciones personalizadas para la aplicación.

Estas excepciones proporcionan una forma estructurada de manejar errores de lógica de negocio
y mapearlos a códigos de estado HTTP apropiados en la capa de API. Cada excepción lleva
una etiqueta `ErrorKind` explícita para que quien la capture pueda decidir por tipo de
error sin depender de la jerarquía de clases.
"""

from enum import Enum
from typing import Optional, Any, List


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    VALIDATION = "validation"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    STORE_FAULT = "store_fault"
    UNKNOWN = "unknown"


class AppException(Exception):
    """Excepción base para todos los errores de la aplicación."""

    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundException(AppException):
    """Excepción cuando un recurso no se encuentra."""

    kind = ErrorKind.NOT_FOUND

    def __init__(
        self,
        resource: str,
        identifier: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.entity = resource
        message = f"{resource} no encontrado"
        if identifier:
            message += f": {identifier}"
        super().__init__(message=message, status_code=404, details=details)


class UnauthorizedException(AppException):
    """Excepción cuando la autenticación es requerida o falla."""

    kind = ErrorKind.UNAUTHORIZED

    def __init__(
        self,
        message: str = "No autenticado",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message=message, status_code=401, details=details)


class ForbiddenException(AppException):
    """Excepción cuando el usuario carece de permisos para realizar una acción."""

    kind = ErrorKind.FORBIDDEN

    def __init__(
        self,
        message: str = "No autorizado para realizar esta acción",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message=message, status_code=403, details=details)


class ValidationException(AppException):
    """Excepción para errores de validación.

    `violations` es la lista de infracciones por campo producida por el motor
    de validación (ver `core.validation.Violation`).
    """

    kind = ErrorKind.VALIDATION

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        violations: Optional[List[Any]] = None,
        entity: Optional[str] = None,
    ):
        self.entity = entity
        self.violations = list(violations or [])
        details = details or {}
        if field:
            details["field"] = field
        if self.violations:
            details["violations"] = [
                {"field": v.field, "message": v.message} for v in self.violations
            ]
        super().__init__(message=message, status_code=422, details=details)


class DuplicateException(AppException):
    """Excepción cuando se intenta crear un recurso duplicado."""

    kind = ErrorKind.ALREADY_EXISTS

    def __init__(
        self,
        resource: str,
        field: Optional[str] = None,
        value: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.entity = resource
        message = f"{resource} duplicado (ya existe)"
        if field and value:
            message += f": {field}='{value}'"
        super().__init__(message=message, status_code=409, details=details)


class DatabaseException(AppException):
    """Excepción para errores de base de datos."""

    kind = ErrorKind.STORE_FAULT

    def __init__(
        self,
        message: str = "Error de base de datos",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message=message, status_code=500, details=details)


class UnknownError(AppException):
    """Fallo interno inesperado; la causa original queda encadenada en __cause__."""

    kind = ErrorKind.UNKNOWN

    def __init__(
        self,
        message: str = "Internal Server Error.",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message=message, status_code=500, details=details)


# ==================== Errores por entidad ====================

class UserNotFoundError(NotFoundException):
    def __init__(self, identifier: Optional[str] = None):
        super().__init__(resource="User", identifier=identifier)


class OwnerNotFoundError(NotFoundException):
    def __init__(self, identifier: Optional[str] = None):
        super().__init__(resource="Owner", identifier=identifier)


class VetNotFoundError(NotFoundException):
    def __init__(self, identifier: Optional[str] = None):
        super().__init__(resource="Vet", identifier=identifier)


class PetNotFoundError(NotFoundException):
    def __init__(self, identifier: Optional[str] = None):
        super().__init__(resource="Pet", identifier=identifier)


class UserAlreadyExistsError(DuplicateException):
    def __init__(self, field: Optional[str] = None, value: Optional[str] = None):
        super().__init__(resource="User", field=field, value=value)


class OwnerAlreadyExistsError(DuplicateException):
    def __init__(self, field: Optional[str] = None, value: Optional[str] = None):
        super().__init__(resource="Owner", field=field, value=value)


class VetAlreadyExistsError(DuplicateException):
    def __init__(self, field: Optional[str] = None, value: Optional[str] = None):
        super().__init__(resource="Vet", field=field, value=value)


class PetAlreadyExistsError(DuplicateException):
    def __init__(self, field: Optional[str] = None, value: Optional[str] = None):
        super().__init__(resource="Pet", field=field, value=value)


class UserValidationError(ValidationException):
    def __init__(self, violations: Optional[List[Any]] = None):
        super().__init__(message="Datos de usuario inválidos", violations=violations, entity="User")


class OwnerValidationError(ValidationException):
    def __init__(self, violations: Optional[List[Any]] = None):
        super().__init__(message="Datos de propietario inválidos", violations=violations, entity="Owner")


class VetValidationError(ValidationException):
    def __init__(self, violations: Optional[List[Any]] = None):
        super().__init__(message="Datos de veterinario inválidos", violations=violations, entity="Vet")


class PetValidationError(ValidationException):
    def __init__(self, violations: Optional[List[Any]] = None):
        super().__init__(message="Datos de mascota inválidos", violations=violations, entity="Pet")


class UserUnauthorizedError(UnauthorizedException):
    def __init__(self, message: str = "Credenciales de usuario inválidas"):
        super().__init__(message=message)
