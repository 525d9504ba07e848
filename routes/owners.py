"""
Owner routes (Controllers).

El registro de propietarios es público; el resto requiere autenticación.
Un OWNER solo puede modificar o eliminar su propia cuenta.
"""

from typing import Any, Dict, List
import logging

from fastapi import APIRouter, Body, Depends, status

from models.users import Role, User
from models.profiles import OwnerView
from models.pets import Pet
from core.exceptions import ForbiddenException
from services.owner_service import OwnerService
from services.pet_service import PetService
from dependencies import get_owner_service, get_pet_service
from auth import get_current_user_dep, require_roles
from routes.errors import handle_service_exception

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/owners", tags=["owners"])


def _ensure_self_or_admin(current_user: User, owner_id: str) -> None:
    if current_user.role != Role.ADMIN and current_user.id != owner_id:
        raise ForbiddenException("Solo puedes gestionar tu propia cuenta")


@router.post("/", response_model=OwnerView, status_code=status.HTTP_201_CREATED)
def create_owner(
    payload: Dict[str, Any] = Body(...),
    service: OwnerService = Depends(get_owner_service),
):
    """
    Register a new owner (public).

    Args:
        payload: name, email, username, password
    """
    try:
        return service.create(payload)
    except Exception as e:
        raise handle_service_exception(e)


@router.get("/", response_model=List[OwnerView])
def get_owners(
    current_user: User = Depends(require_roles(Role.ADMIN, Role.VET)),
    service: OwnerService = Depends(get_owner_service),
):
    try:
        return service.get_all()
    except Exception as e:
        raise handle_service_exception(e)


@router.get("/{owner_id}", response_model=OwnerView)
def get_owner(
    owner_id: str,
    current_user: User = Depends(get_current_user_dep),
    service: OwnerService = Depends(get_owner_service),
):
    try:
        return service.get_one_by_id(owner_id)
    except Exception as e:
        raise handle_service_exception(e)


@router.get("/{owner_id}/pets", response_model=List[Pet])
def get_owner_pets(
    owner_id: str,
    current_user: User = Depends(get_current_user_dep),
    service: OwnerService = Depends(get_owner_service),
    pet_service: PetService = Depends(get_pet_service),
):
    """List the pets of an owner (by the owner's user id)."""
    try:
        owner = service.get_one_by_id(owner_id)
        return pet_service.get_by_owner(owner.owner_id)
    except Exception as e:
        raise handle_service_exception(e)


@router.put("/{owner_id}", response_model=OwnerView)
def update_owner(
    owner_id: str,
    payload: Dict[str, Any] = Body(...),
    current_user: User = Depends(get_current_user_dep),
    service: OwnerService = Depends(get_owner_service),
):
    try:
        _ensure_self_or_admin(current_user, owner_id)
        return service.update({**payload, "id": owner_id})
    except Exception as e:
        raise handle_service_exception(e)


@router.delete("/{owner_id}", response_model=OwnerView)
def delete_owner(
    owner_id: str,
    current_user: User = Depends(get_current_user_dep),
    service: OwnerService = Depends(get_owner_service),
):
    try:
        _ensure_self_or_admin(current_user, owner_id)
        return service.delete(owner_id)
    except Exception as e:
        raise handle_service_exception(e)
