"""
Detail view component - Single item rendering, page title, delete flow.
"""

from ._impl import (
    DEFAULT_DETAIL_CONFIG,
    Confirmed,
    DeleteFlow,
    DetailConfig,
    DetailViewRenderer,
    ServerDeleted,
    StoreUpdated,
    build_page_head,
    compose_page_title,
)
from .component import run, run_delete, run_render
from .models import (
    DeleteInput,
    DeleteOutcome,
    DeleteOutput,
    DeleteStage,
    DetailOptions,
    DetailViewInput,
    DetailViewOutput,
    DetailViewValidationError,
    MetaTag,
    PageHead,
)
from .ports import (
    ApiClientPort,
    CommentRendererPort,
    ConfirmPromptPort,
    ContentStorePort,
    NavigatorPort,
    RulesPort,
)

__all__ = [
    # Entry points
    "run",
    "run_delete",
    "run_render",
    # Input models
    "DeleteInput",
    "DetailOptions",
    "DetailViewInput",
    # Output models
    "DeleteOutcome",
    "DeleteOutput",
    "DeleteStage",
    "DetailViewOutput",
    "DetailViewValidationError",
    "MetaTag",
    "PageHead",
    # Ports
    "ApiClientPort",
    "CommentRendererPort",
    "ConfirmPromptPort",
    "ContentStorePort",
    "NavigatorPort",
    "RulesPort",
    # Renderer and delete flow
    "DEFAULT_DETAIL_CONFIG",
    "Confirmed",
    "DeleteFlow",
    "DetailConfig",
    "DetailViewRenderer",
    "ServerDeleted",
    "StoreUpdated",
    "build_page_head",
    "compose_page_title",
]
