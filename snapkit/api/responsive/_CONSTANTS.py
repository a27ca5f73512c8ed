"""Responsive sizing constants."""

# Viewports used to evaluate vw tokens: mobile, tablet, small/large desktop, full HD
REFERENCE_VIEWPORT_WIDTHS: tuple[int, ...] = (375, 768, 1024, 1280, 1920)

DEFAULT_MULTIPLIERS: tuple[float, ...] = (0.25, 0.5, 0.75, 1, 1.25, 1.5, 2)
DEFAULT_MIN_WIDTH = 200
DEFAULT_MAX_WIDTH = 3840
MAX_IMAGE_HEIGHT = 2160

DEFAULT_BREAKPOINTS: tuple[tuple[str, int], ...] = (
    ("sm", 640),
    ("md", 768),
    ("lg", 1024),
    ("xl", 1280),
    ("2xl", 1536),
)
