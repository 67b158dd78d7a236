"""
Centralized logging using Loguru with context-aware verbosity.

LOG() checks the verbosity of the ProgramState connected to the current
context, so compiler modules can trace their work without taking a state
argument. Library callers that never connect a state get no output.

Usage:
    from atomcss.lib.log import LOG, state_connectToLogger

    state_connectToLogger(state)

    LOG("Compiled 12 rules", level=1)
    LOG("Compiled rule x1abc-A: .x1abc-A{color:red;}", level=2)
    LOG("margin -> margin-top:0px", level=3)
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
    "<cyan>{module: <10}</cyan>:"
    "<cyan>{function: <22}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()  # Remove default handler
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Connect a ProgramState to the logging context.

    Args:
        state: ProgramState instance with verbosity attribute
    """
    _program_state.set(state)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=per-rule, 3=per-declaration)
        **kwargs: Additional loguru metadata
    """
    state = _program_state.get()

    if state and hasattr(state, 'verbosity') and state.verbosity >= level:
        # depth=1 reports the caller, not this helper
        logger.opt(depth=1).debug(message, **kwargs)
