"""Probe configuration and its validation.

Every value coming from the command line goes through the validators below
before a ProbeConfig is built, so a ProbeConfig is always safe to probe with.
"""

import math
import re
from dataclasses import dataclass

PORT_MIN = 0
PORT_MAX = 65535
DEFAULT_PORT = 80
DEFAULT_COUNT = 1

DIGITS = re.compile(r"[0-9]+")


class ConfigError(ValueError):
    pass


def validate_host(host) -> str:
    if not isinstance(host, str) or not host.strip():
        raise ConfigError("missing host")
    return host


def validate_port(port) -> int:
    if isinstance(port, bool) or (isinstance(port, str) and not DIGITS.fullmatch(port)):
        raise ConfigError(f"Invalid port: {port!r}")
    try:
        value = int(port)
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid port: {port!r}")
    if isinstance(port, float) and value != port:
        raise ConfigError(f"Invalid port: {port!r}")
    if not PORT_MIN <= value <= PORT_MAX:
        raise ConfigError(f"Invalid port: {port!r}")
    return value


def validate_count(count) -> int:
    if isinstance(count, bool) or (isinstance(count, str) and not DIGITS.fullmatch(count)):
        raise ConfigError(f"-x must be an integer: {count!r}")
    try:
        value = int(count)
    except (TypeError, ValueError):
        raise ConfigError(f"-x must be an integer: {count!r}")
    if value < 1:
        raise ConfigError("-x must be >= 1")
    return value


def _loose_number(value):
    # float() also takes digit separators and padding
    return "_" in value or value != value.strip()


def validate_timeout(timeout) -> float:
    if isinstance(timeout, bool) or (isinstance(timeout, str) and _loose_number(timeout)):
        raise ConfigError(f"-w must be a number: {timeout!r}")
    try:
        value = float(timeout)
    except (TypeError, ValueError):
        raise ConfigError(f"-w must be a number: {timeout!r}")
    if not math.isfinite(value) or value <= 0:
        raise ConfigError("-w must be > 0")
    return value


@dataclass(frozen=True)
class ProbeConfig:
    host: str
    port: int
    count: int
    timeout: float

    @classmethod
    def create(cls, host, port=DEFAULT_PORT, count=DEFAULT_COUNT, timeout=1.0):
        """Validate raw values and build a ProbeConfig. Raises ConfigError."""
        return cls(
            host=validate_host(host),
            port=validate_port(port),
            count=validate_count(count),
            timeout=validate_timeout(timeout),
        )
