"""Per-format memo of decode support for one client."""

import logging

from .get_format_support_from_ua import get_format_support_from_ua

logger = logging.getLogger(__name__)


class FormatSupportCache:
    """Memoizes format support answers keyed by format name.

    Entries are advisory: clear() at any time only costs a recomputation.
    """

    def __init__(self, user_agent: str = ""):
        self.user_agent = user_agent
        self._results: dict[str, bool] = {}

    def supports(self, fmt: str) -> bool:
        """Return True if the client can decode fmt."""
        key = fmt.lower()
        if key in self._results:
            return self._results[key]

        if key in ("jpeg", "jpg", "png"):
            supported = True
        elif key in ("avif", "webp"):
            supported = getattr(get_format_support_from_ua(self.user_agent), key)
        else:
            supported = False

        logger.debug(f"Format support computed: {key}={supported}")
        self._results[key] = supported
        return supported

    def clear(self) -> None:
        self._results.clear()

    def __len__(self) -> int:
        return len(self._results)
