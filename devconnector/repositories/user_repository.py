"""User repository."""

from devconnector.logging import get_logger
from devconnector.models import User

from .base import BaseRepository

logger = get_logger("repository.user")


class UserRepository(BaseRepository[User]):
    """Repository for User operations."""

    model = User

    def delete_user(self, user_id: int) -> bool:
        """Delete a user account. The caller removes dependent rows first."""
        deleted = self.delete(user_id)
        if deleted:
            logger.info("user_deleted", user_id=user_id)
        return deleted
