"""Identity resolution domain service."""

import logfire

from gallery.config import IdentitySettings
from gallery.domain.error import ProfileNotProvisionedError
from gallery.domain.model import Principal
from gallery.domain.repository import ProfileRepository
from gallery.domain.value import ProfileId, ProfileSource, ResolvedProfile

from .base import Service


class IdentityService(Service):
    """Maps an authenticated principal to the profile that owns its votes."""

    def __init__(
        self,
        profile_repository: ProfileRepository,
        identity_settings: IdentitySettings,
    ) -> None:
        """Initialize identity service.

        Args:
            profile_repository: Profile repository
            identity_settings: Profile resolution settings
        """
        self.profile_repository = profile_repository
        self.identity_settings = identity_settings

    async def resolve(self, principal: Principal) -> ResolvedProfile:
        """Resolve the profile for a principal.

        Tries, in order: a profile whose ID is the principal ID, a profile
        linked through ``user_id``, and finally (if allowed) assumes the
        profile ID equals the principal ID. Only a missing row moves on to
        the next step; store errors propagate.

        Args:
            principal: Authenticated principal

        Returns:
            Resolved profile ID and how it was found

        Raises:
            ProfileNotProvisionedError: If no profile exists and fallback is disabled
        """
        principal_id = str(principal.id)
        with logfire.span("identity_service.resolve", principal_id=principal_id):
            profile = await self.profile_repository.find_by_id(ProfileId(principal.id))
            if profile:
                return ResolvedProfile(profile_id=profile.id, source=ProfileSource.DIRECT)

            profile = await self.profile_repository.find_by_user_id(principal.id)
            if profile:
                logfire.info(
                    "Profile resolved through user_id link",
                    principal_id=principal_id,
                    profile_id=str(profile.id),
                )
                return ResolvedProfile(profile_id=profile.id, source=ProfileSource.LINKED)

            if not self.identity_settings.allow_profile_fallback:
                logfire.error(
                    "No profile provisioned for principal", principal_id=principal_id
                )
                raise ProfileNotProvisionedError(principal_id)

            logfire.warn(
                "IdentityResolutionFallback: profile not found, "
                "using principal id as profile id",
                principal_id=principal_id,
            )
            return ResolvedProfile(
                profile_id=ProfileId(principal.id), source=ProfileSource.FALLBACK
            )

    async def resolve_viewer(self, viewer: Principal | None) -> ResolvedProfile | None:
        """Resolve the profile of a page viewer, if there is one.

        Read views degrade to "no votes" instead of failing, so anonymous
        viewers and unprovisioned principals both yield None.

        Args:
            viewer: Authenticated principal, None for anonymous viewers

        Returns:
            Resolved profile, or None
        """
        if viewer is None:
            return None

        try:
            return await self.resolve(viewer)
        except ProfileNotProvisionedError:
            return None
