"""Single-slot error channel; the latest failure replaces any shown one."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .state import ExplorerState

logger = logging.getLogger(__name__)

DEFAULT_ERROR_TITLE = "Error"


@dataclass(frozen=True)
class ErrorState:
    title: str
    message: str


def report_error(state: ExplorerState, message: str, title: str = DEFAULT_ERROR_TITLE) -> ErrorState:
    error = ErrorState(title=title, message=message)
    state.error = error
    return error


def dismiss_error(state: ExplorerState) -> None:
    if state.error is not None:
        logger.debug("Error popup dismissed")
    state.error = None
