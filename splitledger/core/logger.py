import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_configured = False


def configure_logging(level: str = "INFO"):
    global _configured

    root = logging.getLogger("splitledger")
    root.setLevel(level.upper())

    if not _configured:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        _configured = True

    return root


def get_logger(name: str) -> logging.Logger:
    if not name.startswith("splitledger"):
        name = f"splitledger.{name}"
    return logging.getLogger(name)
