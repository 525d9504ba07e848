"""
User routes (Controllers).

Gestión administrativa de usuarios; todos los endpoints requieren rol ADMIN.
"""

from typing import Any, Dict, List
import logging

from fastapi import APIRouter, Body, Depends, status

from models.users import Role, User, UserView
from services.user_service import UserService
from dependencies import get_user_service
from auth import require_roles
from routes.errors import handle_service_exception

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/", response_model=List[UserView])
def get_users(
    current_user: User = Depends(require_roles(Role.ADMIN)),
    service: UserService = Depends(get_user_service),
):
    try:
        return service.get_all()
    except Exception as e:
        raise handle_service_exception(e)


@router.get("/{user_id}", response_model=UserView)
def get_user(
    user_id: str,
    current_user: User = Depends(require_roles(Role.ADMIN)),
    service: UserService = Depends(get_user_service),
):
    try:
        return service.get_one_by_id(user_id)
    except Exception as e:
        raise handle_service_exception(e)


@router.post("/", response_model=UserView, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: Dict[str, Any] = Body(...),
    current_user: User = Depends(require_roles(Role.ADMIN)),
    service: UserService = Depends(get_user_service),
):
    """
    Create a new user.

    Args:
        payload: name, email, username, password, role y ownerID/vetID según el rol
    """
    try:
        return service.create(payload)
    except Exception as e:
        raise handle_service_exception(e)


@router.put("/{user_id}", response_model=UserView)
def update_user(
    user_id: str,
    payload: Dict[str, Any] = Body(...),
    current_user: User = Depends(require_roles(Role.ADMIN)),
    service: UserService = Depends(get_user_service),
):
    try:
        return service.update({**payload, "id": user_id})
    except Exception as e:
        raise handle_service_exception(e)


@router.delete("/{user_id}", response_model=UserView)
def delete_user(
    user_id: str,
    current_user: User = Depends(require_roles(Role.ADMIN)),
    service: UserService = Depends(get_user_service),
):
    try:
        return service.delete(user_id)
    except Exception as e:
        raise handle_service_exception(e)
