from __future__ import annotations

import logging

_VERBOSE = False


def setup_logging(verbose: bool) -> None:
    global _VERBOSE
    _VERBOSE = verbose
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    # httpx is noisy at DEBUG
    logging.getLogger("httpx").setLevel(logging.INFO if verbose else logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.INFO if verbose else logging.WARNING)


def is_verbose() -> bool:
    return _VERBOSE
