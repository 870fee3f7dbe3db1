"""In-memory record store for users and gym class records."""

import logging
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional
from fastapi import Request

from gymtracker.models.user import User, UpsertUser
from gymtracker.models.gym_class import GymClass, GymClassCreate

logger = logging.getLogger(__name__)

# Fields a partial update may touch; id, user_id and created_at are fixed at creation
UPDATABLE_CLASS_FIELDS = ("date", "attendance", "notes")

PLACEHOLDER_FIRST_NAME = "Demo"
PLACEHOLDER_LAST_NAME = "User"


class MemoryStore:
    """Owns the user and gym class collections for one application instance.

    Nothing is persisted; contents are lost when the process exits.
    """

    def __init__(self):
        self.users: Dict[str, User] = {}
        self.gym_classes: Dict[str, GymClass] = {}

    # Users

    def get_user(self, user_id: str) -> Optional[User]:
        """Get user by ID."""
        return self.users.get(user_id)

    def upsert_user(self, user_data: UpsertUser) -> User:
        """Create or replace a user.

        Optional fields missing from `user_data` are stored as None. When the
        user already exists its `created_at` is kept and `updated_at` refreshed.
        """
        now = datetime.utcnow()
        existing = self.users.get(user_data.id)
        user = User(
            id=user_data.id,
            email=user_data.email or None,
            first_name=user_data.first_name or None,
            last_name=user_data.last_name or None,
            profile_image_url=user_data.profile_image_url or None,
            created_at=existing.created_at if existing else now,
            updated_at=now,
        )
        self.users[user.id] = user
        if existing:
            logger.debug(f"Updated user {user.id}: {user.email}")
        else:
            logger.debug(f"Created user {user.id}: {user.email}")
        return user

    def ensure_user(self, user_id: str, email: Optional[str] = None) -> User:
        """Return the user for an identity, creating a placeholder profile on first sight."""
        user = self.get_user(user_id)
        if user:
            return user
        logger.info(f"User {user_id} not found, creating placeholder profile")
        return self.upsert_user(
            UpsertUser(
                id=user_id,
                email=email,
                first_name=PLACEHOLDER_FIRST_NAME,
                last_name=PLACEHOLDER_LAST_NAME,
                profile_image_url=None,
            )
        )

    # Gym classes

    def list_classes(self, user_id: str) -> List[GymClass]:
        """Get all classes for a user sorted by date (most recent first).

        Records sharing a date keep their insertion order.
        """
        classes = [c for c in self.gym_classes.values() if c.user_id == user_id]
        return sorted(classes, key=lambda c: c.date, reverse=True)

    def get_class(self, class_id: str) -> Optional[GymClass]:
        """Get class record by ID."""
        return self.gym_classes.get(class_id)

    def create_class(self, data: GymClassCreate, user_id: str) -> GymClass:
        """Store a new class record for `user_id` under a fresh UUID."""
        gym_class = GymClass(
            id=str(uuid.uuid4()),
            user_id=user_id,
            date=data.date,
            attendance=data.attendance,
            notes=data.notes or None,
            created_at=datetime.utcnow(),
        )
        self.gym_classes[gym_class.id] = gym_class
        logger.debug(f"Created gym class {gym_class.id} on {gym_class.date} for user {user_id}")
        return gym_class

    def update_class(self, class_id: str, updates: Dict[str, Any]) -> Optional[GymClass]:
        """Merge `updates` over an existing record.

        Returns:
            The merged record, or None if `class_id` is unknown
        """
        existing = self.gym_classes.get(class_id)
        if not existing:
            return None

        changes = {k: v for k, v in updates.items() if k in UPDATABLE_CLASS_FIELDS}
        if not changes:
            return existing

        updated = existing.model_copy(update=changes)
        self.gym_classes[class_id] = updated
        logger.debug(f"Updated gym class {class_id}: {sorted(changes)}")
        return updated

    def delete_class(self, class_id: str) -> bool:
        """Delete a class record. Returns False if it did not exist."""
        if self.gym_classes.pop(class_id, None) is None:
            return False
        logger.debug(f"Deleted gym class {class_id}")
        return True


def get_store(request: Request) -> MemoryStore:
    """Get the record store owned by the application (dependency for FastAPI)."""
    return request.app.state.store
