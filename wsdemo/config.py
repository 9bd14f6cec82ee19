import enum
import secrets


class Config:
    """Base configuration."""

    SECRET_KEY = secrets.token_bytes(24)
    SITE_NAME = "wsdemo"
    PORT = 3300
    CORS_ALLOWED_ORIGINS = "*"
    SOCKETIO_ASYNC_MODE = "gevent"


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False


class TestingConfig(Config):
    """Testing configuration.

    Socket.IO runs in threading mode so the test client needs no gevent hub.
    """

    TESTING = True
    SOCKETIO_ASYNC_MODE = "threading"


class ConfigType(enum.Enum):
    DEVELOPMENT = DevelopmentConfig
    PRODUCTION = ProductionConfig
    TESTING = TestingConfig
