from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from enum import Enum


class PetType(str, Enum):
    CAT = "CAT"
    DOG = "DOG"
    BIRD = "BIRD"
    FISH = "FISH"
    RABBIT = "RABBIT"
    REPTILE = "REPTILE"
    RODENT = "RODENT"
    OTHER = "OTHER"


class Pet(BaseModel):
    """Mascota. `owner_id` es el id del perfil Owner (no el del User)."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: Optional[str] = None
    name: str
    breed: str
    color: str
    age: int
    weight: float
    type: PetType
    owner_id: str = Field(..., alias="ownerID")
