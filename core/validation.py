"""
Motor de validación de payloads.

Cada conjunto de reglas es un esquema pydantic registrado por nombre. `validate`
aplica el esquema a un payload candidato y devuelve un `ValidationOutcome` con el
payload normalizado o la lista de infracciones por campo. Aquí solo se valida la
forma de los datos; la existencia de entidades referenciadas la comprueba el
servicio correspondiente.
"""

import logging
import re
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError, field_validator, model_validator

from config import settings
from core.exceptions import ValidationException
from core.utils import parse_enum
from models.users import Role
from models.pets import PetType

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s.]+$")
SYMBOL_PATTERN = re.compile(r"[^A-Za-z0-9\s]")


class Violation(BaseModel):
    model_config = ConfigDict(frozen=True)

    field: str
    message: str


class ValidationOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    ok: bool
    value: Dict[str, Any] = Field(default_factory=dict)
    violations: List[Violation] = Field(default_factory=list)


# ==================== Reglas de campo ====================

def _non_blank(value: str) -> str:
    stripped = value.strip()
    if not stripped:
        raise ValueError("must not be blank")
    return stripped


def _email(value: str) -> str:
    stripped = value.strip()
    if not EMAIL_PATTERN.match(stripped):
        raise ValueError("must be a valid email address")
    return stripped


def _username(value: str) -> str:
    stripped = _non_blank(value)
    if len(stripped) < settings.username_min_length:
        raise ValueError(f"must be at least {settings.username_min_length} characters long")
    return stripped


def _password(value: str) -> str:
    problems = []
    if len(value) < settings.password_min_length:
        problems.append(f"at least {settings.password_min_length} characters")
    if not re.search(r"[A-Z]", value):
        problems.append("an uppercase letter")
    if not re.search(r"[a-z]", value):
        problems.append("a lowercase letter")
    if not re.search(r"\d", value):
        problems.append("a digit")
    if not SYMBOL_PATTERN.search(value):
        problems.append("a special character")
    if problems:
        raise ValueError("must contain " + ", ".join(problems))
    return value


def _enum(enum_cls, value: Any, field: str):
    try:
        return parse_enum(enum_cls, value, field)
    except ValidationException as e:
        raise ValueError(e.message)


# ==================== Conjuntos de reglas ====================

class _Rules(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class _AccountRules(_Rules):
    """Campos comunes de Owner, Vet y User."""

    name: str
    email: str
    username: str
    password: str

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        return _non_blank(v)

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        return _email(v)

    @field_validator("username")
    @classmethod
    def check_username(cls, v: str) -> str:
        return _username(v)

    @field_validator("password")
    @classmethod
    def check_password(cls, v: str) -> str:
        return _password(v)


class _ProfileRules(_AccountRules):
    expected_role: ClassVar[Role]

    role: Optional[Role] = None

    @field_validator("role", mode="before")
    @classmethod
    def check_role(cls, v: Any) -> Optional[Role]:
        if v is None:
            return v
        return _enum(Role, v, "role")

    @model_validator(mode="after")
    def check_role_matches_profile(self):
        if self.role is not None and self.role != self.expected_role:
            raise ValueError(f"role must be {self.expected_role.value}")
        return self


class OwnerRules(_ProfileRules):
    expected_role = Role.OWNER


class VetRules(_ProfileRules):
    expected_role = Role.VET


class _UpdateMixin(_Rules):
    id: str

    @field_validator("id")
    @classmethod
    def check_id(cls, v: str) -> str:
        return _non_blank(v)


class OwnerUpdateRules(_UpdateMixin, OwnerRules):
    password: Optional[str] = None

    @field_validator("password")
    @classmethod
    def check_password(cls, v: Optional[str]) -> Optional[str]:
        return v if v is None else _password(v)


class VetUpdateRules(_UpdateMixin, VetRules):
    password: Optional[str] = None

    @field_validator("password")
    @classmethod
    def check_password(cls, v: Optional[str]) -> Optional[str]:
        return v if v is None else _password(v)


class UserRules(_AccountRules):
    role: Role
    owner_id: Optional[str] = Field(None, alias="ownerID")
    vet_id: Optional[str] = Field(None, alias="vetID")

    @field_validator("role", mode="before")
    @classmethod
    def check_role(cls, v: Any) -> Role:
        return _enum(Role, v, "role")

    @field_validator("owner_id", "vet_id")
    @classmethod
    def check_reference(cls, v: Optional[str]) -> Optional[str]:
        return v if v is None else _non_blank(v)

    @model_validator(mode="after")
    def check_profile_reference(self):
        if self.role == Role.ADMIN and (self.owner_id or self.vet_id):
            raise ValueError("ADMIN users cannot reference an owner or vet profile")
        if self.role == Role.OWNER and (not self.owner_id or self.vet_id):
            raise ValueError("OWNER users must reference an owner profile and no vet profile")
        if self.role == Role.VET and (not self.vet_id or self.owner_id):
            raise ValueError("VET users must reference a vet profile and no owner profile")
        return self


class UserUpdateRules(_UpdateMixin, UserRules):
    password: Optional[str] = None

    @field_validator("password")
    @classmethod
    def check_password(cls, v: Optional[str]) -> Optional[str]:
        return v if v is None else _password(v)


class PetRules(_Rules):
    name: str
    breed: str
    color: str
    age: StrictInt = Field(..., ge=0)
    weight: float = Field(..., ge=0, allow_inf_nan=False)
    type: PetType
    owner_id: str = Field(..., alias="ownerID")

    @field_validator("name", "breed", "color", "owner_id")
    @classmethod
    def check_text(cls, v: str) -> str:
        return _non_blank(v)

    @field_validator("weight", mode="before")
    @classmethod
    def check_weight(cls, v: Any) -> Any:
        if isinstance(v, bool):
            raise ValueError("must be a number")
        return v

    @field_validator("type", mode="before")
    @classmethod
    def check_type(cls, v: Any) -> PetType:
        return _enum(PetType, v, "type")


class PetUpdateRules(_UpdateMixin, PetRules):
    pass


RULE_SETS: Dict[str, Type[_Rules]] = {
    "owner": OwnerRules,
    "owner_update": OwnerUpdateRules,
    "vet": VetRules,
    "vet_update": VetUpdateRules,
    "user": UserRules,
    "user_update": UserUpdateRules,
    "pet": PetRules,
    "pet_update": PetUpdateRules,
}


# ==================== API ====================

def _as_mapping(payload: Any) -> Mapping[str, Any]:
    if isinstance(payload, BaseModel):
        return payload.model_dump()
    if payload is None:
        return {}
    return payload


def _to_violations(error: ValidationError) -> List[Violation]:
    violations = []
    for err in error.errors():
        field = ".".join(str(part) for part in err.get("loc", ())) or "__all__"
        message = err.get("msg", "invalid value")
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        violations.append(Violation(field=field, message=message))
    return violations


def validate(payload: Any, rule_set: str) -> ValidationOutcome:
    """
    Valida un payload candidato contra un conjunto de reglas.

    Args:
        payload: dict (o modelo pydantic) con los campos candidatos
        rule_set: Nombre del conjunto de reglas (ver RULE_SETS)

    Returns:
        ValidationOutcome con el payload normalizado o las infracciones

    Raises:
        ValueError: Si el conjunto de reglas no existe
    """
    try:
        rules = RULE_SETS[rule_set]
    except KeyError:
        raise ValueError(f"'{rule_set}' rule set does not exist")

    try:
        model = rules.model_validate(_as_mapping(payload))
    except ValidationError as e:
        violations = _to_violations(e)
        logger.debug(f"Validation failed for rule set '{rule_set}': {violations}")
        return ValidationOutcome(ok=False, violations=violations)

    return ValidationOutcome(ok=True, value=model.model_dump())


def validate_or_raise(
    payload: Any,
    rule_set: str,
    error_cls: Type[ValidationException],
) -> Dict[str, Any]:
    """
    Igual que `validate`, pero lanza `error_cls(violations=...)` si hay infracciones.

    Returns:
        El payload normalizado
    """
    outcome = validate(payload, rule_set)
    if not outcome.ok:
        raise error_cls(violations=outcome.violations)
    return outcome.value
