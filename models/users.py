from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from enum import Enum


class Role(str, Enum):
    ADMIN = "ADMIN"
    OWNER = "OWNER"
    VET = "VET"


class User(BaseModel):
    """Identidad de autenticación. Valor inmutable; el hash nunca sale de la capa de servicio."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: Optional[str] = None
    name: str
    username: str
    email: str
    password_hash: str
    role: Role
    owner_id: Optional[str] = Field(None, alias="ownerID")
    vet_id: Optional[str] = Field(None, alias="vetID")


class UserView(BaseModel):
    """Usuario sin secretos, tal como se devuelve a los clientes."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    username: str
    email: str
    role: Role
    owner_id: Optional[str] = Field(None, alias="ownerID")
    vet_id: Optional[str] = Field(None, alias="vetID")

    @classmethod
    def from_user(cls, user: User) -> "UserView":
        return cls(
            id=user.id,
            name=user.name,
            username=user.username,
            email=user.email,
            role=user.role,
            owner_id=user.owner_id,
            vet_id=user.vet_id,
        )


class AuthResult(BaseModel):
    """Resultado de login/logout. En logout ambos campos quedan vacíos."""
    model_config = ConfigDict(frozen=True)

    token: Optional[str] = None
    profile: Optional[UserView] = None


class LoginRequest(BaseModel):
    email: str
    password: str


class LogoutRequest(BaseModel):
    email: str
