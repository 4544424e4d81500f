"""Pantry and grocery list CRUD."""

from sqlalchemy.orm import Session

from app.models.pantry import GroceryItem, PantryItem


class PantryService:
    """Handles the user's pantry items."""

    def list_items(self, db: Session, user_id: int) -> list[PantryItem]:
        """Get all pantry items for a user, newest first."""
        return (
            db.query(PantryItem)
            .filter(PantryItem.user_id == user_id)
            .order_by(PantryItem.created_at.desc(), PantryItem.id.desc())
            .all()
        )

    def get_item(self, db: Session, item_id: int, user_id: int) -> PantryItem | None:
        """Get a single pantry item by ID, scoped to user."""
        return db.query(PantryItem).filter(PantryItem.id == item_id, PantryItem.user_id == user_id).first()

    def create_item(
        self, db: Session, user_id: int, name: str, quantity: str | None, expires_at: str | None
    ) -> PantryItem:
        item = PantryItem(user_id=user_id, name=name.strip(), quantity=quantity, expires_at=expires_at)
        db.add(item)
        db.commit()
        db.refresh(item)
        return item

    def update_item(self, db: Session, item: PantryItem, changes: dict) -> PantryItem:
        """Apply a partial update."""
        for key, value in changes.items():
            setattr(item, key, value)
        db.commit()
        db.refresh(item)
        return item

    def delete_item(self, db: Session, item: PantryItem) -> None:
        db.delete(item)
        db.commit()


class GroceryService:
    """Handles the user's grocery list."""

    def list_items(self, db: Session, user_id: int) -> list[GroceryItem]:
        """Unbought items first, then in insertion order."""
        return (
            db.query(GroceryItem)
            .filter(GroceryItem.user_id == user_id)
            .order_by(GroceryItem.bought.asc(), GroceryItem.id.asc())
            .all()
        )

    def get_item(self, db: Session, item_id: int, user_id: int) -> GroceryItem | None:
        return db.query(GroceryItem).filter(GroceryItem.id == item_id, GroceryItem.user_id == user_id).first()

    def create_item(self, db: Session, user_id: int, name: str, quantity: str | None) -> GroceryItem:
        item = GroceryItem(user_id=user_id, name=name.strip(), quantity=quantity, bought=False)
        db.add(item)
        db.commit()
        db.refresh(item)
        return item

    def update_item(self, db: Session, item: GroceryItem, changes: dict) -> GroceryItem:
        for key, value in changes.items():
            setattr(item, key, value)
        db.commit()
        db.refresh(item)
        return item

    def delete_item(self, db: Session, item: GroceryItem) -> None:
        db.delete(item)
        db.commit()

    def clear_bought(self, db: Session, user_id: int) -> int:
        """Delete every bought item. Returns how many were removed."""
        removed = (
            db.query(GroceryItem)
            .filter(GroceryItem.user_id == user_id, GroceryItem.bought.is_(True))
            .delete(synchronize_session=False)
        )
        db.commit()
        return removed


_pantry_service: PantryService | None = None
_grocery_service: GroceryService | None = None


def get_pantry_service() -> PantryService:
    """Get singleton pantry service instance."""
    global _pantry_service
    if _pantry_service is None:
        _pantry_service = PantryService()
    return _pantry_service


def get_grocery_service() -> GroceryService:
    """Get singleton grocery service instance."""
    global _grocery_service
    if _grocery_service is None:
        _grocery_service = GroceryService()
    return _grocery_service
