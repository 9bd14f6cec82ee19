"""Socket.IO event handlers for wsdemo."""

import logging

from wsdemo.constants import EVENT_CONNECT, EVENT_DISCONNECT
from wsdemo.lib.connection import current_connection, remember_identity


def _make_event_handler(socketio, dispatcher, event_name):
    def handle_event(payload=None):
        return dispatcher.dispatch(event_name, current_connection(socketio), payload)

    handle_event.__name__ = f"handle_{event_name}"
    return handle_event


def setup_socket_events(socketio, dispatcher):
    """Register Socket.IO event handlers.

    Lifecycle callbacks are bound explicitly, every other event comes from the
    dispatcher's registration table.

    Args:
        socketio: The SocketIO instance.
        dispatcher: The EventDispatcher that owns the handlers.
    """

    @socketio.on(EVENT_CONNECT)
    def handle_connect(auth=None) -> None:
        """Capture the handshake identity and greet the new client."""
        remember_identity(auth)
        dispatcher.on_connect(current_connection(socketio))

    @socketio.on(EVENT_DISCONNECT)
    def handle_disconnect(reason=None) -> None:
        dispatcher.on_disconnect(current_connection(socketio))

    for event_name in dispatcher.event_names:
        socketio.on_event(event_name, _make_event_handler(socketio, dispatcher, event_name))

    @socketio.on_error_default
    def handle_error(e) -> None:
        logging.exception(f"Error while handling Socket.IO event: {e}")
