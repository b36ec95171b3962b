"""Request-scoped dependencies shared by API and page routes."""

from typing import Optional
from fastapi import Header
from core.exceptions import AuthenticationError
from core.viewer import Viewer

VIEWER_ID_HEADER = "X-User-Id"
VIEWER_EMAIL_HEADER = "X-User-Email"


def get_viewer(
    x_user_id: Optional[str] = Header(None, alias=VIEWER_ID_HEADER),
    x_user_email: Optional[str] = Header(None, alias=VIEWER_EMAIL_HEADER),
) -> Optional[Viewer]:
    """Build the viewer from the identity headers, or None when signed out."""
    if not x_user_id:
        return None
    return Viewer(id=x_user_id, email=x_user_email or None)


def require_viewer(
    x_user_id: Optional[str] = Header(None, alias=VIEWER_ID_HEADER),
    x_user_email: Optional[str] = Header(None, alias=VIEWER_EMAIL_HEADER),
) -> Viewer:
    """Like `get_viewer` but rejects signed-out requests with a 401."""
    viewer = get_viewer(x_user_id, x_user_email)
    if viewer is None:
        raise AuthenticationError()
    return viewer
