import logging
import sys

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure snapkit logging to stderr.

    Only the first call installs the handler; later calls just change the level.

    Args:
        level: Level for the "snapkit" logger
    """
    global _CONFIGURED

    root_logger = logging.getLogger("snapkit")
    root_logger.setLevel(level)

    if _CONFIGURED:
        return

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    _CONFIGURED = True
