"""Serve the voice order API: ``python -m voiceorder`` or ``voiceorder``."""

import socket
import sys

import uvicorn

from .config import settings


def _port_free(host: str, port: int) -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        try:
            s.bind((host, port))
        except OSError:
            return False
    return True


def main() -> int:
    if not _port_free(settings.host, settings.port):
        print(
            f"voiceorder: {settings.host}:{settings.port} is taken; "
            "set PORT to serve on another port.",
            file=sys.stderr,
        )
        return 1

    uvicorn.run(
        "voiceorder.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
