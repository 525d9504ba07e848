from .auth import router as auth_router
from .users import router as users_router
from .owners import router as owners_router
from .vets import router as vets_router
from .pets import router as pets_router

__all__ = [
    "auth_router",
    "users_router",
    "owners_router",
    "vets_router",
    "pets_router",
]
