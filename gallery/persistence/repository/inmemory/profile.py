"""In-memory profile repository for testing."""

from typing import Optional

from gallery.domain.model.profile import Profile
from gallery.domain.repository.profile import ProfileRepository
from gallery.domain.value import PrincipalId, ProfileId


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self) -> None:
        self._profiles: dict[ProfileId, Profile] = {}

    def add(self, profile: Profile) -> Profile:
        """Seed a profile."""
        self._profiles[profile.id] = profile
        return profile

    async def find_by_id(self, profile_id: ProfileId) -> Optional[Profile]:
        """Find a profile by ID."""
        return self._profiles.get(profile_id)

    async def find_by_user_id(self, user_id: PrincipalId) -> Optional[Profile]:
        """Find a profile by its linked auth user."""
        for profile in self._profiles.values():
            if profile.user_id == user_id:
                return profile
        return None
