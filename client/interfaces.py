"""Collaborators the subscription flow talks to.

`Navigator` and `Notifier` stand in for the router and the toast layer of
the host page. `RecordingNavigator` and `NoticeLog` are the implementations
used by the server-rendered pages, which turn the recorded target into a
redirect and the notices into page messages.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Protocol


class Navigator(Protocol):
    def push(self, path: str) -> None:
        """Navigate to an in-app route."""

    def assign(self, url: str) -> None:
        """Send the browser to an absolute URL."""


class Notifier(Protocol):
    def loading(self, message: str, id: Optional[str] = None) -> None: ...

    def success(self, message: str, id: Optional[str] = None) -> None: ...

    def error(self, message: str, id: Optional[str] = None) -> None: ...

    def info(self, message: str, id: Optional[str] = None) -> None: ...


class CheckoutGateway(Protocol):
    def initiate(self, user_id: str, plan_type: str, email: str) -> str:
        """Start checkout and return the hosted page URL.

        Raises CheckoutError on failure.
        """


@dataclass
class RecordingNavigator:
    target: Optional[str] = None

    def push(self, path: str) -> None:
        self.target = path

    def assign(self, url: str) -> None:
        self.target = url


@dataclass
class Notice:
    level: str
    message: str
    id: Optional[str] = None


@dataclass
class NoticeLog:
    """Keeps notices in order; a notice with an id replaces the previous one."""

    notices: List[Notice] = field(default_factory=list)

    def _add(self, level: str, message: str, id: Optional[str]) -> None:
        if id is not None:
            self.notices = [n for n in self.notices if n.id != id]
        self.notices.append(Notice(level, message, id))

    def loading(self, message: str, id: Optional[str] = None) -> None:
        self._add("loading", message, id)

    def success(self, message: str, id: Optional[str] = None) -> None:
        self._add("success", message, id)

    def error(self, message: str, id: Optional[str] = None) -> None:
        self._add("error", message, id)

    def info(self, message: str, id: Optional[str] = None) -> None:
        self._add("info", message, id)
