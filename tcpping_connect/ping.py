"""TCP connect probe for latency measurement.

A refused or reset connection is a timed answer from a live TCP stack, so it
counts as a latency sample. Timeouts and every other failure count as loss.

One attempt shares a single deadline across name resolution and every
resolved address. It ends once the deadline passes, unless getaddrinfo
itself blocks for longer.
"""

import errno
import socket
import time
from dataclasses import dataclass
from typing import Union

from tcpping_connect.debug import log

REJECTION_ERRNOS = (errno.ECONNREFUSED, errno.ECONNRESET)


@dataclass(frozen=True)
class Reachable:
    latency_ms: float


@dataclass(frozen=True)
class Loss:
    reason: str = "error"


ProbeOutcome = Union[Reachable, Loss]


def is_refused_or_reset(exc: BaseException) -> bool:
    if isinstance(exc, (ConnectionRefusedError, ConnectionResetError)):
        return True
    return isinstance(exc, OSError) and exc.errno in REJECTION_ERRNOS


def _elapsed_ms(start: float) -> float:
    return max(0.0, (time.monotonic() - start) * 1000)


def _resolve(host, port):
    try:
        return socket.getaddrinfo(host, port, type=socket.SOCK_STREAM)
    except socket.gaierror as e:
        log(f"{host}:{port} could not be resolved: {e}", 'debug')
    except ValueError as e:
        # IDNA encoding of a malformed host name
        log(f"{host}:{port} is not a valid address: {e}", 'debug')
    except OSError as e:
        log(f"{host}:{port} resolution failed: {e}", 'debug')
    return []


def _connect(family, type_, proto, sockaddr, timeout, start):
    try:
        with socket.socket(family, type_, proto) as sock:
            sock.settimeout(timeout)
            sock.connect(sockaddr)
            return Reachable(_elapsed_ms(start))
    except TimeoutError:
        return Loss("timeout")
    except OSError as e:
        if is_refused_or_reset(e):
            return Reachable(_elapsed_ms(start))
        log(f"{sockaddr} failed: {e}", 'debug')
        return Loss("error")


def probe(host: str, port: int, timeout: float) -> ProbeOutcome:
    """Make exactly one TCP connection attempt to host:port.

    Addresses are tried in resolver order with whatever time is left before
    the deadline. The first connect or active rejection wins.
    """
    start = time.monotonic()
    deadline = start + timeout

    addresses = _resolve(host, port)
    if not addresses:
        return Loss("unresolved")

    outcome = Loss("error")
    for family, type_, proto, _, sockaddr in addresses:
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            outcome = Loss("timeout")
            break
        outcome = _connect(family, type_, proto, sockaddr, remaining, start)
        if isinstance(outcome, Reachable):
            log(f"{host}:{port} answered via {sockaddr[0]} in {outcome.latency_ms:.3f} ms", 'debug')
            return outcome

    log(f"{host}:{port} lost ({outcome.reason})", 'debug')
    return outcome
