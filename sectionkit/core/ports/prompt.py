from typing import Protocol


class ConfirmPromptPort(Protocol):
    def confirm(self, message: str) -> bool:
        """Block until the user accepts or declines."""
        ...
