"""Named image filters, each described as a filter-graph expression."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ImageFilter:
    """An image filter: its name, a human description and its filter-graph expression."""

    name: str
    description: str
    filter_desc: str


BLUR = ImageFilter("blur", "Simple blur filter", "boxblur=5:1")
GAUSSIAN_BLUR = ImageFilter("gaussian_blur", "Gaussian blur filter", "gblur=sigma=2")
SHARPEN = ImageFilter("sharpen", "Sharpen filter", "unsharp=5:5:1.5")
EDGE = ImageFilter(
    "edge", "Edge detection filter", "edgedetect=mode=canny:high=0.5:low=0.1"
)
SEPIA = ImageFilter(
    "sepia",
    "Sepia tone filter",
    "colorchannelmixer=.393:.769:.189:0:.349:.686:.168:0:.272:.534:.131",
)
CUSTOM_CONV = ImageFilter(
    "custom_conv",
    "Custom convolution filter",
    "convolution=" + ":".join(["0 0 0 0 1 0 0 0 0"] * 9),
)
GRAYSCALE = ImageFilter("grayscale", "Grayscale filter", "hue=s=0")
ROTATE_90 = ImageFilter("rotate_90", "Rotate 90 degrees", "transpose=1")
ROTATE_180 = ImageFilter("rotate_180", "Rotate 180 degrees", "transpose=2,transpose=2")
ROTATE_270 = ImageFilter("rotate_270", "Rotate 270 degrees", "transpose=2")
EDGE_SOBEL = ImageFilter(
    "edge_sobel",
    "Sobel edge detection",
    "convolution=" + ":".join(["1 2 1 0 0 0 -1 -2 -1"] * 4),
)
EDGE_PREWITT = ImageFilter(
    "edge_prewitt",
    "Prewitt edge detection",
    "convolution=" + ":".join(["1 1 1 0 0 0 -1 -1 -1"] * 4),
)
EDGE_ROBERTS = ImageFilter(
    "edge_roberts",
    "Roberts edge detection",
    "convolution=" + ":".join(["1 0 0 -1"] * 4),
)
EDGE_LAPLACE = ImageFilter(
    "edge_laplace",
    "Laplace edge detection",
    "convolution=" + ":".join(["0 1 0 1 -4 1 0 1 0"] * 4),
)

_AVAILABLE = (
    BLUR,
    GAUSSIAN_BLUR,
    SHARPEN,
    EDGE,
    SEPIA,
    CUSTOM_CONV,
    GRAYSCALE,
    ROTATE_90,
    ROTATE_180,
    ROTATE_270,
    EDGE_SOBEL,
    EDGE_PREWITT,
    EDGE_ROBERTS,
    EDGE_LAPLACE,
)

_BY_NAME = {f.name: f for f in _AVAILABLE}


def available_filters():
    """Return all built-in filters in their fixed order."""
    return _AVAILABLE


def find_filter(name):
    """Return the built-in filter with the given name; raise KeyError if there is none."""
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(f"unknown image filter: {name}") from None