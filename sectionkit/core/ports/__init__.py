from .api import ApiClientPort, DeleteResult
from .comments import CommentInput, CommentRendererPort
from .navigation import NavigatorPort
from .prompt import ConfirmPromptPort
from .store import ContentStorePort
from .timer import TimerPort

__all__ = [
    "ApiClientPort",
    "CommentInput",
    "CommentRendererPort",
    "ConfirmPromptPort",
    "ContentStorePort",
    "DeleteResult",
    "NavigatorPort",
    "TimerPort",
]
