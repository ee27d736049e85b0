from __future__ import annotations

from ..client import Requester


class EndpointGroup:
    """A set of related REST operations issued through a shared requester."""

    def __init__(self, requester: Requester) -> None:
        self._requester = requester
