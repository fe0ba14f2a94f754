import logging
import os

LOGGER_NAME = "drushkit"
DEBUG_ENV = "DRUSHKIT_DEBUG"


def setup_logging(verbose: bool = False) -> None:
    """Send drushkit debug logs to stderr when asked to; stay quiet otherwise."""
    logger = logging.getLogger(LOGGER_NAME)
    if not (verbose or os.environ.get(DEBUG_ENV)):
        if not logger.handlers:
            logger.addHandler(logging.NullHandler())
        return
    logger.setLevel(logging.DEBUG)
    if any(getattr(h, "_drushkit", False) for h in logger.handlers):
        return
    handler = logging.StreamHandler()
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    setattr(handler, "_drushkit", True)
    logger.addHandler(handler)
    logger.debug("Debug logging enabled")
