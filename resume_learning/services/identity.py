"""Identity: find-or-create a user by external identifier."""
import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from resume_learning.core.errors import ValidationError
from resume_learning.models.user import User
from resume_learning.schemas.user import UserOut
from resume_learning.services.base import StoreService, store_operation

logger = logging.getLogger(__name__)


class IdentityService(StoreService):

    @store_operation("Database error")
    async def find_or_create(self, external_id: str, display_name: str = "") -> UserOut:
        """Return the user for external_id, creating it on first login.

        A repeat login only bumps updated_at; the stored display name is kept.
        """
        external_id = (external_id or "").strip()
        if not external_id:
            raise ValidationError("User ID is required")
        name = (display_name or "").strip() or external_id

        user = await self._find(external_id)
        if user is None:
            now = datetime.now(timezone.utc)
            user = User(user_id=external_id, name=name, created_at=now, updated_at=now)
            self.db.add(user)
            try:
                await self.db.commit()
            except IntegrityError:
                # Lost a concurrent first-login race; the other insert won
                await self.db.rollback()
                logger.warning("Concurrent login created user %s first, re-reading", external_id)
                user = await self._find(external_id)
                if user is None:
                    raise
            else:
                await self.db.refresh(user)
                logger.info("New user created: %s", external_id)
                return UserOut.model_validate(user)

        user.updated_at = datetime.now(timezone.utc)
        await self.db.commit()
        await self.db.refresh(user)
        logger.info("User logged in: %s", external_id)
        return UserOut.model_validate(user)

    async def _find(self, external_id: str) -> User | None:
        result = await self.db.execute(select(User).where(User.user_id == external_id))
        return result.scalar_one_or_none()
