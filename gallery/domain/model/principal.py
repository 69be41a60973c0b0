"""Principal: the authenticated caller as seen by the auth provider."""

from typing import Optional

from gallery.domain.model.common import DomainModel
from gallery.domain.value import PrincipalId


class Principal(DomainModel):
    """Authenticated identity.

    Comes from a verified access token; never persisted by this service.
    """

    id: PrincipalId
    email: Optional[str] = None
    role: Optional[str] = None
