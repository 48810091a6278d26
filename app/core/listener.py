"""Acquisition of the listening socket the server runs on."""

from __future__ import annotations

import socket


class ListenerBindError(Exception):
    """Raised when the listening socket cannot be bound.

    Attributes:
        host: Interface the bind was attempted on.
        port: Port the bind was attempted on.
    """

    def __init__(self, host: str, port: int, reason: str) -> None:
        super().__init__(f"could not listen on {host}:{port}: {reason}")
        self.host = host
        self.port = port


def bind_listener(host: str, port: int, backlog: int = 2048) -> socket.socket:
    """Bind and listen on ``(host, port)``.

    Args:
        host: Interface to bind, e.g. ``"0.0.0.0"``.
        port: TCP port. No range check is done beyond what the OS enforces.
        backlog: Listen queue length, uvicorn's default.

    Returns:
        socket.socket: A listening socket owned by the caller.

    Raises:
        ListenerBindError: The port is taken, privileged, or not a valid port.
    """
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen(backlog)
    except (OSError, OverflowError) as exc:
        sock.close()
        raise ListenerBindError(host, port, str(exc)) from exc
    return sock
