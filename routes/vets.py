"""
Vet routes (Controllers).

Solo un ADMIN da de alta, modifica o elimina veterinarios; cualquier usuario
autenticado puede consultarlos.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, status

from models.users import Role, User
from models.profiles import VetView
from services.vet_service import VetService
from dependencies import get_vet_service
from auth import get_current_user_dep, require_roles
from routes.errors import handle_service_exception

router = APIRouter(prefix="/vets", tags=["vets"])


@router.get("/", response_model=List[VetView])
def get_vets(
    current_user: User = Depends(get_current_user_dep),
    service: VetService = Depends(get_vet_service),
):
    try:
        return service.get_all()
    except Exception as e:
        raise handle_service_exception(e)


@router.get("/{vet_id}", response_model=VetView)
def get_vet(
    vet_id: str,
    current_user: User = Depends(get_current_user_dep),
    service: VetService = Depends(get_vet_service),
):
    try:
        return service.get_one_by_id(vet_id)
    except Exception as e:
        raise handle_service_exception(e)


@router.post("/", response_model=VetView, status_code=status.HTTP_201_CREATED)
def create_vet(
    payload: Dict[str, Any] = Body(...),
    current_user: User = Depends(require_roles(Role.ADMIN)),
    service: VetService = Depends(get_vet_service),
):
    try:
        return service.create(payload)
    except Exception as e:
        raise handle_service_exception(e)


@router.put("/{vet_id}", response_model=VetView)
def update_vet(
    vet_id: str,
    payload: Dict[str, Any] = Body(...),
    current_user: User = Depends(require_roles(Role.ADMIN)),
    service: VetService = Depends(get_vet_service),
):
    try:
        return service.update({**payload, "id": vet_id})
    except Exception as e:
        raise handle_service_exception(e)


@router.delete("/{vet_id}", response_model=VetView)
def delete_vet(
    vet_id: str,
    current_user: User = Depends(require_roles(Role.ADMIN)),
    service: VetService = Depends(get_vet_service),
):
    try:
        return service.delete(vet_id)
    except Exception as e:
        raise handle_service_exception(e)
