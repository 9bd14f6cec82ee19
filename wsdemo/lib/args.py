import argparse
import logging
from pathlib import Path

from wsdemo.config import Config, ConfigType

# Default values for CLI args
default_port = Config.PORT
default_cors_allowed_origins = Config.CORS_ALLOWED_ORIGINS
default_log_level = logging.INFO
default_max_log_files = 5
default_config = "production"


def port_type(value):
    """Verify the port input"""
    try:
        port = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Port must be an integer, but got '{value}'")

    if port < 0 or port > 65535:
        raise argparse.ArgumentTypeError(f"Port must be between 0 and 65535, but got {port}")

    return port


def log_level_type(value):
    """Accept either a numeric level (20) or a level name (INFO)"""
    if str(value).isdigit():
        return int(value)

    level = logging.getLevelName(str(value).upper())
    if not isinstance(level, int):
        raise argparse.ArgumentTypeError(f"Unknown log level '{value}'")

    return level


class ArgsNamespace(argparse.Namespace):
    """Provides typehints to the input args"""

    port: int
    cors_allowed_origins: str
    log_level: int
    log_dir: Path | None
    max_log_files: int
    config: str


def parse_wsdemo_args(argv=None) -> ArgsNamespace:
    parser = argparse.ArgumentParser(
        description="Socket.IO event dispatch demo server",
    )

    parser.add_argument(
        "-p",
        "--port",
        help="Desired http port (default: %d)" % default_port,
        default=default_port,
        type=port_type,
        required=False,
    )
    parser.add_argument(
        "--cors-allowed-origins",
        help="Origins allowed to open a Socket.IO connection, '*' allows all (default: %s)"
        % default_cors_allowed_origins,
        default=default_cors_allowed_origins,
        required=False,
    )
    parser.add_argument(
        "-l",
        "--log-level",
        help="Logging level, name or int value "
        "(DEBUG: 10, INFO: 20, WARNING: 30, ERROR: 40, CRITICAL: 50). "
        f"(default: {default_log_level})",
        default=default_log_level,
        type=log_level_type,
        required=False,
    )
    parser.add_argument(
        "--log-dir",
        help="Directory to write log files to. Defaults to the per-user config directory.",
        default=None,
        type=Path,
        required=False,
    )
    parser.add_argument(
        "--max-log-files",
        help="Number of previous log files to keep (default: %d)" % default_max_log_files,
        default=default_max_log_files,
        type=int,
        required=False,
    )
    parser.add_argument(
        "--config",
        help="Configuration profile to run with (default: %s)" % default_config,
        choices=[c.name.lower() for c in ConfigType if c is not ConfigType.TESTING],
        default=default_config,
        required=False,
    )

    return parser.parse_args(argv, namespace=ArgsNamespace())
