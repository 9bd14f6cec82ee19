from wsdemo.lib.connection import Connection
from wsdemo.lib.dispatcher import EventDispatcher
from wsdemo.version import __version__

PACKAGE = __package__
VERSION = __version__

__all__ = [
    "VERSION",
    "PACKAGE",
    Connection.__name__,
    EventDispatcher.__name__,
]
