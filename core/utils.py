"""
Funciones de utilidad generales.

Incluye el mapeo bidireccional entre los enums de la aplicación (`Role`,
`PetType`) y su representación almacenada. Cualquier rol o tipo nuevo se
agrega una sola vez en el enum y este módulo lo resuelve en ambos sentidos.
"""

from typing import Any, Type, TypeVar
from enum import Enum as PyEnum

from core.exceptions import ValidationException
from models.users import Role
from models.pets import PetType

E = TypeVar("E", bound=PyEnum)


def enum_to_value(value: Any) -> Any:
    """
    Convierte un Enum a su valor, o devuelve el valor sin cambios.

    Args:
        value: Valor a convertir

    Returns:
        Enum.value si value es un Enum, de lo contrario el valor sin cambios
    """
    if isinstance(value, PyEnum):
        return value.value
    return value


def normalize_stored_enum(value: Any) -> Any:
    """
    Normaliza los valores de enum almacenados en la base de datos.

    La base de datos puede almacenar valores de enum como nombres completos (por ejemplo, "Role.OWNER").
    Este ayudante devuelve el nombre corto después del punto ("OWNER").

    Args:
        value: Valor de enum almacenado en la base de datos

    Returns:
        Valor normalizado (nombre corto)
    """
    if value is None:
        return value
    if isinstance(value, str) and "." in value:
        return value.split(".", 1)[1]
    return value


def parse_enum(enum_cls: Type[E], value: Any, field: str) -> E:
    """
    Resuelve `value` a un miembro de `enum_cls`.

    Acepta miembros del enum, nombres o valores en cualquier capitalización
    y la forma "Clase.MIEMBRO".

    Raises:
        ValidationException: Si el valor no pertenece al enum
    """
    if isinstance(value, enum_cls):
        return value
    raw = normalize_stored_enum(enum_to_value(value))
    if isinstance(raw, str):
        key = raw.strip().upper()
        if key in enum_cls.__members__:
            return enum_cls[key]
        for member in enum_cls:
            if str(member.value).upper() == key:
                return member
    raise ValidationException(
        message=f"{field} no válido: {value!r}",
        field=field,
        details={"allowed": [m.value for m in enum_cls]},
    )


def role_to_storage(value: Any) -> str:
    """Rol de aplicación -> cadena almacenada."""
    return parse_enum(Role, value, "role").value


def role_from_storage(value: Any) -> Role:
    """Cadena almacenada -> rol de aplicación."""
    return parse_enum(Role, value, "role")


def pet_type_to_storage(value: Any) -> str:
    """Tipo de mascota de aplicación -> cadena almacenada."""
    return parse_enum(PetType, value, "type").value


def pet_type_from_storage(value: Any) -> PetType:
    """Cadena almacenada -> tipo de mascota de aplicación."""
    return parse_enum(PetType, value, "type")
