"""The signed-in viewer as reported by the identity provider.

The session is owned by the provider; this app only reads the viewer's id
and email and passes them explicitly to the code that needs them.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Viewer:
    id: Optional[str] = None
    email: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.id)
