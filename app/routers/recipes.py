"""Saved recipe API endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import CurrentUser, get_current_user
from app.schemas.recipe import SavedRecipeCreate, SavedRecipeResponse
from app.services.recipes import get_recipe_service

router = APIRouter(prefix="/recipes", tags=["Recipes"])


@router.get("", response_model=list[SavedRecipeResponse])
def list_saved_recipes(
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[SavedRecipeResponse]:
    """List the current user's saved recipes."""
    recipes = get_recipe_service().list_recipes(db, user.user_id)
    return [SavedRecipeResponse.model_validate(r) for r in recipes]


@router.post("", response_model=SavedRecipeResponse, status_code=201)
def save_recipe(
    body: SavedRecipeCreate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> SavedRecipeResponse:
    saved = get_recipe_service().save_recipe(db, user.user_id, body.title, body.recipe, body.image_url)
    return SavedRecipeResponse.model_validate(saved)


@router.get("/{recipe_id}", response_model=SavedRecipeResponse)
def get_saved_recipe(
    recipe_id: int,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> SavedRecipeResponse:
    saved = get_recipe_service().get_recipe(db, recipe_id, user.user_id)
    if not saved:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return SavedRecipeResponse.model_validate(saved)


@router.delete("/{recipe_id}")
def delete_saved_recipe(
    recipe_id: int,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> dict:
    service = get_recipe_service()
    saved = service.get_recipe(db, recipe_id, user.user_id)
    if not saved:
        raise HTTPException(status_code=404, detail="Recipe not found")
    service.delete_recipe(db, saved)
    return {"message": "Recipe deleted"}
