"""
Perfiles de cuenta (Owner y Vet).

Un perfil siempre va emparejado 1:1 con un `User` cuyo rol coincide y cuya
referencia (`owner_id` / `vet_id`) apunta al perfil.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from .users import Role, User


class Owner(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    name: str
    email: str
    username: str
    password_hash: str


class Vet(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    name: str
    email: str
    username: str
    password_hash: str


class OwnerView(BaseModel):
    """Vista de propietario construida a partir del User emparejado (sin contraseña)."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    role: Role = Role.OWNER
    email: str
    name: str
    username: str
    owner_id: Optional[str] = Field(None, alias="ownerID")

    @classmethod
    def from_user(cls, user: User) -> "OwnerView":
        return cls(
            id=user.id,
            role=user.role,
            email=user.email,
            name=user.name,
            username=user.username,
            owner_id=user.owner_id,
        )


class VetView(BaseModel):
    """Vista de veterinario construida a partir del User emparejado (sin contraseña)."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    role: Role = Role.VET
    email: str
    name: str
    username: str
    vet_id: Optional[str] = Field(None, alias="vetID")

    @classmethod
    def from_user(cls, user: User) -> "VetView":
        return cls(
            id=user.id,
            role=user.role,
            email=user.email,
            name=user.name,
            username=user.username,
            vet_id=user.vet_id,
        )
