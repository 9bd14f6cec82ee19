"""Fixtures that run the real gevent server in a subprocess."""

import socket
import subprocess
import sys
import time

import pytest
import socketio

STARTUP_TIMEOUT = 15


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


def _wait_until_listening(url: str, process: subprocess.Popen) -> None:
    deadline = time.monotonic() + STARTUP_TIMEOUT
    while time.monotonic() < deadline:
        if process.poll() is not None:
            raise RuntimeError(f"server exited with code {process.returncode}")
        client = socketio.Client()
        try:
            client.connect(url, transports=["polling"], wait_timeout=2)
        except socketio.exceptions.ConnectionError:
            time.sleep(0.2)
            continue
        client.disconnect()
        return
    raise RuntimeError(f"server did not start within {STARTUP_TIMEOUT}s")


@pytest.fixture(scope="session")
def server_url(tmp_path_factory):
    port = _free_port()
    log_dir = tmp_path_factory.mktemp("logs")
    process = subprocess.Popen(
        [sys.executable, "-m", "wsdemo", "-p", str(port), "--log-dir", str(log_dir)],
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
    )
    url = f"http://127.0.0.1:{port}"
    try:
        _wait_until_listening(url, process)
        yield url
    finally:
        process.terminate()
        process.wait(timeout=10)


@pytest.fixture
def connect(server_url):
    """Factory for clients connected as the given user; all are disconnected afterwards."""
    clients = []

    def _connect(user_name: str) -> socketio.Client:
        client = socketio.Client()
        client.connect(
            server_url, auth={"userName": user_name}, transports=["polling"], wait_timeout=5
        )
        clients.append(client)
        return client

    yield _connect
    for client in clients:
        client.disconnect()
