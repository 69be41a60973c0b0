"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from gallery.domain.model.profile import Profile
from gallery.domain.value import PrincipalId, ProfileId


class ProfileRepository(ABC):
    """Repository for Profile entity (read-only)."""

    @abstractmethod
    async def find_by_id(self, profile_id: ProfileId) -> Optional[Profile]:
        """Find a profile by its own ID.

        Args:
            profile_id: The profile's unique identifier

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: PrincipalId) -> Optional[Profile]:
        """Find a profile through the ``user_id`` linking column.

        Args:
            user_id: The principal ID stored on the profile

        Returns:
            The profile if found, None otherwise
        """
        pass
