"""Per-connection view handed to the event dispatcher."""

from __future__ import annotations

from typing import Any, Callable

from flask import request, session

from wsdemo.constants import AUTH_USER_NAME_KEY, SESSION_IDENTITY_KEY


class Connection:
    """One live client session.

    Exposes the identity captured at connect time and an emit capability that
    only ever reaches this session. Handlers never see the transport itself.
    """

    def __init__(self, sid: str | None, identity: str | None, send: Callable[..., None]):
        self._sid = sid
        self._identity = identity
        self._send = send

    @property
    def sid(self) -> str | None:
        return self._sid

    @property
    def identity(self) -> str | None:
        return self._identity

    def emit(self, event_name: str, *args: Any) -> None:
        """Push a named event with an ordered argument list to this connection."""
        self._send(event_name, *args)

    def __repr__(self) -> str:
        return f"Connection(sid={self._sid!r}, identity={self._identity!r})"


def read_identity(auth) -> str | None:
    """Extract the user name from the Socket.IO handshake auth payload."""
    if isinstance(auth, dict):
        return auth.get(AUTH_USER_NAME_KEY)
    return None


def remember_identity(auth) -> None:
    """Store the handshake identity in the per-connection session.

    Must be called from the connect handler, the session is forked per
    connection from that point on.
    """
    session[SESSION_IDENTITY_KEY] = read_identity(auth)


def current_connection(socketio) -> Connection:
    """Build a Connection for the client that triggered the current Socket.IO event.

    Args:
        socketio: The SocketIO instance used to deliver emitted events.

    Returns:
        Connection: bound to ``request.sid`` in the current namespace.
    """
    sid = request.sid
    namespace = request.namespace

    def send(event_name: str, *args: Any) -> None:
        # A tuple payload is delivered as separate arguments on the client
        socketio.emit(event_name, args, to=sid, namespace=namespace)

    return Connection(sid, session.get(SESSION_IDENTITY_KEY), send)
