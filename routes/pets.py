"""
Pet routes (Controllers).

This module handles HTTP requests/responses for pet endpoints.
All business logic is delegated to the PetService layer.
"""

from typing import Any, Dict, List
import logging

from fastapi import APIRouter, Body, Depends, status

from models.users import User
from models.pets import Pet
from services.pet_service import PetService
from dependencies import get_pet_service
from auth import get_current_user_dep
from routes.errors import handle_service_exception

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pets", tags=["pets"])


@router.get("/", response_model=List[Pet])
def get_pets(
    current_user: User = Depends(get_current_user_dep),
    service: PetService = Depends(get_pet_service),
):
    try:
        return service.get_all()
    except Exception as e:
        raise handle_service_exception(e)


@router.get("/{pet_id}", response_model=Pet)
def get_pet(
    pet_id: str,
    current_user: User = Depends(get_current_user_dep),
    service: PetService = Depends(get_pet_service),
):
    try:
        return service.get_one_by_id(pet_id)
    except Exception as e:
        raise handle_service_exception(e)


@router.post("/", response_model=Pet, status_code=status.HTTP_201_CREATED)
def create_pet(
    payload: Dict[str, Any] = Body(...),
    current_user: User = Depends(get_current_user_dep),
    service: PetService = Depends(get_pet_service),
):
    """
    Create a new pet.

    Args:
        payload: name, breed, color, age, weight, type y ownerID (id del perfil Owner)
    """
    try:
        return service.create(payload)
    except Exception as e:
        raise handle_service_exception(e)


@router.put("/{pet_id}", response_model=Pet)
def update_pet(
    pet_id: str,
    payload: Dict[str, Any] = Body(...),
    current_user: User = Depends(get_current_user_dep),
    service: PetService = Depends(get_pet_service),
):
    try:
        return service.update({**payload, "id": pet_id})
    except Exception as e:
        raise handle_service_exception(e)


@router.delete("/{pet_id}", response_model=Pet)
def delete_pet(
    pet_id: str,
    current_user: User = Depends(get_current_user_dep),
    service: PetService = Depends(get_pet_service),
):
    try:
        return service.delete(pet_id)
    except Exception as e:
        raise handle_service_exception(e)
