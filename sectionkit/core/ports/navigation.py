from typing import Protocol


class NavigatorPort(Protocol):
    def go_to(self, route: str) -> None:
        """Navigate the client to route."""
        ...
