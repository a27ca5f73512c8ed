"""Browser capability command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .get_best_supported_format import get_best_supported_format
from .get_format_support_from_ua import get_format_support_from_ua
from .parse_browser_info import parse_browser_info


def cmd_browser(user_agent: str) -> StageResult:
    """Report the browser identity and modern format support for a user agent."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Parsing user agent...")
        info = parse_browser_info(user_agent)
        support = get_format_support_from_ua(user_agent)
        warnings: list[str] = []
        if info.name == "unknown":
            warnings.append("Unrecognized browser; assuming no AVIF or WebP support")

        yield (1.0, "Complete")
        result_obj.result = f"Detected {info.name} {info.version} on {info.platform}"
        result_obj.output = {
            "errors": [],
            "warnings": warnings,
            "browser": {
                "name": info.name,
                "version": info.version,
                "platform": info.platform,
                "ios_version": f"{info.ios_version.major}.{info.ios_version.minor}" if info.ios_version else None,
            },
            "support": {"avif": support.avif, "webp": support.webp},
            "best_format": get_best_supported_format(None, support),
        }
        result_obj.success = True

    return StageResult(announce="Checking browser capabilities...", progress_callback=do_work)
