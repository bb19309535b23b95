#!/usr/bin/env python3
"""
albumapi Core API

Configuration, encoder selection, the must() fault adapter and the request
boundary that turns faults into generic server errors.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import Callable, Optional, ParamSpec, Tuple, TypeVar

from .encoder import ENCODERS, Encoder
from .exceptions import ServerFault


logger = logging.getLogger(__name__)

P = ParamSpec('P')
R = TypeVar('R')


# ============================================================================
# Global Configuration
# ============================================================================

@dataclass
class ResponseConfig:
    """
    Global configuration for response encoding.

    Attributes:
        default_format: Encoder used by get_encoder() when no format is given
        fault_status: Status code returned by the fault boundary
        fault_body: Body returned by the fault boundary
    """
    default_format: str = "json"
    fault_status: int = 500
    fault_body: str = "Internal Server Error"

    def __post_init__(self):
        """Validate the default format."""
        self.default_format = self.default_format.lower()
        if self.default_format not in ENCODERS:
            raise ValueError(
                f"Unknown default format '{self.default_format}' "
                f"(expected one of: {', '.join(sorted(ENCODERS))})"
            )


_config: Optional[ResponseConfig] = None


def configure(
    default_format: str = "json",
    fault_status: int = 500,
    fault_body: str = "Internal Server Error",
) -> ResponseConfig:
    """
    Configure response encoding.

    This should be called once at application startup.

    Args:
        default_format: Format name used when none is requested (default: "json")
        fault_status: Status returned for server faults (default: 500)
        fault_body: Body returned for server faults

    Returns:
        The new configuration
    """
    global _config

    _config = ResponseConfig(
        default_format=default_format,
        fault_status=fault_status,
        fault_body=fault_body,
    )

    logger.info(f"albumapi configured: default_format={_config.default_format}, fault_status={fault_status}")
    return _config


def get_config() -> ResponseConfig:
    """Get the current configuration."""
    global _config
    if _config is None:
        _config = ResponseConfig()
    return _config


def reset_config() -> None:
    """Drop the current configuration; the next get_config() uses defaults."""
    global _config
    _config = None


# ============================================================================
# Encoder Selection
# ============================================================================

def get_encoder(name: Optional[str] = None) -> Encoder:
    """
    Look up an encoder by format name.

    Args:
        name: "json", "xml" or "text" (case-insensitive). None selects the
            configured default format.

    Returns:
        The shared encoder instance for that format

    Raises:
        KeyError: Unknown format name
    """
    if name is None:
        name = get_config().default_format
    try:
        return ENCODERS[name.lower()]
    except KeyError:
        raise KeyError(
            f"Unknown format '{name}' (expected one of: {', '.join(sorted(ENCODERS))})"
        ) from None


# ============================================================================
# Fault Handling
# ============================================================================

def must(data: str, err: Optional[BaseException] = None) -> str:
    """
    Return data, or raise a ServerFault if err is set.

    Pairs with Encoder.try_encode():

        body = must(*json_encoder.try_encode(album))

    The fault is meant to be caught by recover(), which logs the error and
    sends a generic 500 to the client.
    """
    if err is not None:
        raise ServerFault(err) from err
    return data


def recover(handler: Callable[P, Tuple[int, str]]) -> Callable[P, Tuple[int, str]]:
    """
    Decorator for request handlers returning (status, body).

    A ServerFault raised by the handler is logged with its cause and replaced
    by (fault_status, fault_body) from the configuration. The underlying error
    is never part of the returned body. Other exceptions propagate.
    """

    @functools.wraps(handler)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Tuple[int, str]:
        try:
            return handler(*args, **kwargs)
        except ServerFault as fault:
            logger.error(
                f"Request handler {handler.__name__} failed: {fault.error!r}",
                exc_info=fault,
            )
            config = get_config()
            return config.fault_status, config.fault_body

    return wrapper
