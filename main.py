"""
gpt5-gateway entry point.

Loads settings from the environment, builds the application and serves it
with uvicorn. Exits with status 1 on invalid configuration or when the
listening port is taken.
"""
import errno
import logging
import socket
import sys

from pydantic import ValidationError

from gpt5_gateway.app import create_app
from gpt5_gateway.config.settings import get_settings

try:
    settings = get_settings()
except ValidationError as e:
    logging.basicConfig(level=logging.INFO)
    logging.error(f"Invalid environment: {e}")
    sys.exit(1)

logging.basicConfig(
    level=settings.log_level.upper(),
    format="[%(asctime)s] %(levelname)s %(name)s - %(message)s",
)

app = create_app(settings)


def _port_in_use(host: str, port: int) -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind((host, port))
        except OSError as e:
            if e.errno == errno.EADDRINUSE:
                return True
            raise
    return False


if __name__ == "__main__":
    import uvicorn

    if _port_in_use(settings.host, settings.port):
        logging.error(
            f"Port {settings.port} is already in use. Set a different PORT "
            "environment variable or stop the process using this port."
        )
        sys.exit(1)

    logging.info(f"{settings.app_name} listening on http://localhost:{settings.port}")
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
    )
