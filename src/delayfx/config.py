"""
Configuration and error handling utilities for delayfx.

Copyright (c) 2026 delayfx contributors

MIT License
"""

from enum import Enum
from typing import Type, Optional
from delayfx.logger import get_logger

logger = get_logger(__name__)


class ErrorMode(Enum):
    """
    Error handling mode for delayfx operations.
    
    STRICT: Advisory errors raise exceptions (default, fail-fast)
    LENIENT: Advisory errors become warnings, execution continues
    
    Invariant violations (e.g. modulation width greater than the base
    delay) are always fatal, whatever the mode.
    """
    STRICT = "strict"
    LENIENT = "lenient"


# Module-level default error mode
DEFAULT_ERROR_MODE: ErrorMode = ErrorMode.STRICT


def set_error_mode(mode: ErrorMode) -> None:
    """
    Set the default error mode for all delayfx operations.
    
    Args:
        mode: The error mode to use
    """
    global DEFAULT_ERROR_MODE
    DEFAULT_ERROR_MODE = mode


def get_error_mode() -> ErrorMode:
    """
    Get the current default error mode.
    
    Returns:
        The current error mode
    """
    return DEFAULT_ERROR_MODE


def handle_error(
    message: str,
    fatal: bool = False,
    error_mode: Optional[ErrorMode] = None,
    exception_class: Type[Exception] = RuntimeError,
) -> bool:
    """
    Handle an error based on the error mode.
    
    In STRICT mode (or if fatal=True), raises an exception.
    In LENIENT mode (and fatal=False), logs a warning and returns True.
    
    Args:
        message: Error description
        fatal: If True, always raise regardless of mode
        error_mode: Override the default error mode (optional)
        exception_class: Exception type to raise (default: RuntimeError)
    
    Returns:
        True if operation should continue (warning was issued)
    
    Raises:
        exception_class: If in STRICT mode or fatal=True
    
    Example:
        # Strict mode raises ConfigurationError, lenient mode logs a warning
        if abs(gain) >= 1.0:
            handle_error("Unstable gain.", exception_class=ConfigurationError)
        
        # Always raises regardless of mode
        if line is None:
            handle_error("No delay line allocated.", fatal=True)
    """
    mode = error_mode if error_mode is not None else DEFAULT_ERROR_MODE
    
    if fatal or mode == ErrorMode.STRICT:
        raise exception_class(message)
    else:
        logger.warning(message)
        return True
