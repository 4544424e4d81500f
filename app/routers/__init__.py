"""API routers."""

from app.routers.auth import router as auth_router
from app.routers.nutrition import router as nutrition_router
from app.routers.pantry import grocery_router, pantry_router
from app.routers.recipes import router as recipes_router
from app.routers.users import router as users_router

__all__ = ["auth_router", "users_router", "pantry_router", "grocery_router", "nutrition_router", "recipes_router"]
