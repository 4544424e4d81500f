"""Pantry and grocery list API endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import CurrentUser, get_current_user
from app.schemas.pantry import (
    GroceryItemCreate,
    GroceryItemResponse,
    GroceryItemUpdate,
    PantryItemCreate,
    PantryItemResponse,
    PantryItemUpdate,
)
from app.services.pantry import get_grocery_service, get_pantry_service

pantry_router = APIRouter(prefix="/pantry", tags=["Pantry"])
grocery_router = APIRouter(prefix="/grocery", tags=["Grocery"])


@pantry_router.get("", response_model=list[PantryItemResponse])
def list_pantry_items(
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[PantryItemResponse]:
    """List all pantry items for the current user."""
    items = get_pantry_service().list_items(db, user.user_id)
    return [PantryItemResponse.model_validate(i) for i in items]


@pantry_router.post("", response_model=PantryItemResponse, status_code=201)
def add_pantry_item(
    body: PantryItemCreate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> PantryItemResponse:
    item = get_pantry_service().create_item(db, user.user_id, body.name, body.quantity, body.expires_at)
    return PantryItemResponse.model_validate(item)


@pantry_router.put("/{item_id}", response_model=PantryItemResponse)
def update_pantry_item(
    item_id: int,
    body: PantryItemUpdate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> PantryItemResponse:
    service = get_pantry_service()
    item = service.get_item(db, item_id, user.user_id)
    if not item:
        raise HTTPException(status_code=404, detail="Pantry item not found")
    item = service.update_item(db, item, body.model_dump(exclude_unset=True))
    return PantryItemResponse.model_validate(item)


@pantry_router.delete("/{item_id}")
def delete_pantry_item(
    item_id: int,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> dict:
    service = get_pantry_service()
    item = service.get_item(db, item_id, user.user_id)
    if not item:
        raise HTTPException(status_code=404, detail="Pantry item not found")
    service.delete_item(db, item)
    return {"message": "Pantry item deleted"}


@grocery_router.get("", response_model=list[GroceryItemResponse])
def list_grocery_items(
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[GroceryItemResponse]:
    """List the current user's grocery list."""
    items = get_grocery_service().list_items(db, user.user_id)
    return [GroceryItemResponse.model_validate(i) for i in items]


@grocery_router.post("", response_model=GroceryItemResponse, status_code=201)
def add_grocery_item(
    body: GroceryItemCreate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> GroceryItemResponse:
    item = get_grocery_service().create_item(db, user.user_id, body.name, body.quantity)
    return GroceryItemResponse.model_validate(item)


# Registered before /{item_id} so "bought" is not parsed as an id.
@grocery_router.delete("/bought")
def clear_bought_items(
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> dict:
    """Remove every item already marked as bought."""
    removed = get_grocery_service().clear_bought(db, user.user_id)
    return {"message": "Bought items cleared", "removed": removed}


@grocery_router.put("/{item_id}", response_model=GroceryItemResponse)
def update_grocery_item(
    item_id: int,
    body: GroceryItemUpdate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> GroceryItemResponse:
    """Rename, change quantity or tick an item off."""
    service = get_grocery_service()
    item = service.get_item(db, item_id, user.user_id)
    if not item:
        raise HTTPException(status_code=404, detail="Grocery item not found")
    item = service.update_item(db, item, body.model_dump(exclude_unset=True))
    return GroceryItemResponse.model_validate(item)


@grocery_router.delete("/{item_id}")
def delete_grocery_item(
    item_id: int,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> dict:
    service = get_grocery_service()
    item = service.get_item(db, item_id, user.user_id)
    if not item:
        raise HTTPException(status_code=404, detail="Grocery item not found")
    service.delete_item(db, item)
    return {"message": "Grocery item deleted"}
