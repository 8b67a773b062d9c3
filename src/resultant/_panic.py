"""The single abnormal-termination path used by ``unwrap``."""

from __future__ import annotations

import logging
import os
from typing import NoReturn

from resultant.config import get_config
from resultant.errors import Panic

log = logging.getLogger(__name__)

_HINT = "Check is_ok() first, or use unwrap_or() for a panic-free default."


def panic(message: str) -> NoReturn:
    """Terminate the calling context with ``message``.

    Raises :class:`Panic` by default; aborts the process when the active
    config selects ``panic_mode="abort"``.
    """
    if get_config().panic_mode == "abort":
        log.critical("Result panic, aborting: %s", message)
        os.abort()
    log.debug("Result panic: %s", message)
    raise Panic(message, hint=_HINT)
