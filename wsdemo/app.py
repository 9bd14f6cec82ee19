import logging
import sys

from flask import Flask
from flask_socketio import SocketIO
from gevent.pywsgi import WSGIServer

from wsdemo.config import ConfigType
from wsdemo.lib.args import parse_wsdemo_args
from wsdemo.lib.dispatcher import EventDispatcher
from wsdemo.lib.logger import configure_logger
from wsdemo.routes.socket_events import setup_socket_events


def create_app(config_type: ConfigType = ConfigType.PRODUCTION, **overrides) -> Flask:
    """Build the Flask app with its SocketIO server and event dispatcher attached.

    Args:
        config_type: Configuration profile to load.
        **overrides: Config keys replacing the profile's values, e.g. ``PORT``.

    Returns:
        Flask: the app, exposing ``app.socketio`` and ``app.dispatcher``.
    """
    app = Flask(__name__)
    app.config.from_object(config_type.value)
    app.config.update(overrides)

    socketio = SocketIO(
        async_mode=app.config["SOCKETIO_ASYNC_MODE"],
        cors_allowed_origins=app.config["CORS_ALLOWED_ORIGINS"],
    )
    socketio.init_app(app)

    dispatcher = EventDispatcher(sleep=socketio.sleep)
    setup_socket_events(socketio, dispatcher)

    # expose the server objects to the rest of the app
    app.socketio = socketio
    app.dispatcher = dispatcher
    return app


def main(argv=None):
    args = parse_wsdemo_args(argv)

    configure_logger(
        log_level=args.log_level, log_dir=args.log_dir, max_log_files=args.max_log_files
    )

    app = create_app(
        ConfigType[args.config.upper()],
        PORT=args.port,
        CORS_ALLOWED_ORIGINS=args.cors_allowed_origins,
    )

    logging.info(f"Listening on port {args.port}")
    server = WSGIServer(("0.0.0.0", args.port), app, log=None, error_log=logging.getLogger())
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logging.info("Shutting down")
        server.stop()

    sys.exit()


if __name__ == "__main__":
    main()
