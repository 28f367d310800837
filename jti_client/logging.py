"""Root logging setup for jti-client runs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# grpcio's Python-side loggers; the C core is governed by GRPC_VERBOSITY instead.
NETWORK_LOGGERS = ("grpc._channel", "grpc._server", "grpc._common")


def configure_logging(
    level: str = "INFO", *, log_path: Optional[Path] = None, log_network: bool = False
) -> None:
    """Install console and optional file handlers on the root logger.

    Args:
        level: Level name such as ``"INFO"``; unknown names fall back to INFO.
        log_path: Also append to this file, creating its directory if needed.
        log_network: Let the gRPC transport loggers through at ``level``.
            Otherwise they only report warnings and errors.
    """

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    logging.captureWarnings(True)
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )

    if log_path:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(file_handler)

    network_level = logging.NOTSET if log_network else logging.WARNING
    for name in NETWORK_LOGGERS:
        logging.getLogger(name).setLevel(network_level)
