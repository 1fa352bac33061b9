"""
Loguru logging bound to the running export's verbosity.

The CLI connects its ProgramState once; LOG() calls anywhere in the
export, including awaited page exports, then filter on that state's
verbosity. LOG_warning() reports per-page failures at any verbosity.

Usage:
    state_connectToLogger(state)
    LOG("Exporting /blog/foo/", level=1)
    LOG("Protected 3 code blocks", level=3)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

# Context variable to hold current ProgramState
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{function: <20}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()  # Remove default handler
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Bind the export state whose verbosity LOG() filters on.

    Tasks created afterwards inherit the binding.
    """
    _program_state.set(state)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log a debug message when the bound state's verbosity reaches level.

    Levels: 1 progress, 2 per-page detail (-v), 3 placeholder and rule
    detail (-vv).
    """
    state = _program_state.get()

    if state and hasattr(state, 'verbosity') and state.verbosity >= level:
        logger.opt(depth=1).debug(message, **kwargs)


def LOG_warning(message: str, **kwargs: Any) -> None:
    """Log a warning regardless of verbosity (per-page failures the build survives)."""
    logger.opt(depth=1).warning(message, **kwargs)
