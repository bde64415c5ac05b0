from __future__ import annotations

import logging


def configure_app_logging(level: str = "INFO") -> None:
    """
    Set the level of the ``swa_api`` logger tree from ``Settings.log_level``.

    Handlers come from the server (uvicorn); records propagate to them. At
    INFO each request is logged as anonymous or authenticated (user id and
    provider); DEBUG adds the generated user number. The principal header
    value itself is never logged.
    """

    logger = logging.getLogger("swa_api")
    logger.setLevel(level.upper())
    logger.propagate = True
