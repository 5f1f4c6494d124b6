import pytest

from vtlpub.img_filters import (
    BLUR,
    SEPIA,
    ImageFilter,
    available_filters,
    find_filter,
)


def test_blur_filter_description():
    assert find_filter("blur").filter_desc == "boxblur=5:1"
    assert BLUR.name == "blur"


def test_sepia_filter_description():
    assert find_filter("sepia").filter_desc == (
        "colorchannelmixer=.393:.769:.189:0:.349:.686:.168:0:.272:.534:.131"
    )
    assert SEPIA.description == "Sepia tone filter"


def test_available_filters_order():
    names = [f.name for f in available_filters()]
    assert names == [
        "blur",
        "gaussian_blur",
        "sharpen",
        "edge",
        "sepia",
        "custom_conv",
        "grayscale",
        "rotate_90",
        "rotate_180",
        "rotate_270",
        "edge_sobel",
        "edge_prewitt",
        "edge_roberts",
        "edge_laplace",
    ]


@pytest.mark.parametrize(
    "name, desc",
    [
        ("gaussian_blur", "gblur=sigma=2"),
        ("sharpen", "unsharp=5:5:1.5"),
        ("edge", "edgedetect=mode=canny:high=0.5:low=0.1"),
        ("grayscale", "hue=s=0"),
        ("rotate_90", "transpose=1"),
        ("rotate_180", "transpose=2,transpose=2"),
        ("rotate_270", "transpose=2"),
        ("edge_roberts", "convolution=1 0 0 -1:1 0 0 -1:1 0 0 -1:1 0 0 -1"),
        (
            "edge_laplace",
            "convolution=0 1 0 1 -4 1 0 1 0:0 1 0 1 -4 1 0 1 0:"
            "0 1 0 1 -4 1 0 1 0:0 1 0 1 -4 1 0 1 0",
        ),
        (
            "edge_sobel",
            "convolution=1 2 1 0 0 0 -1 -2 -1:1 2 1 0 0 0 -1 -2 -1:"
            "1 2 1 0 0 0 -1 -2 -1:1 2 1 0 0 0 -1 -2 -1",
        ),
    ],
)
def test_filter_descriptions(name, desc):
    assert find_filter(name).filter_desc == desc


def test_custom_conv_has_nine_identity_kernels():
    desc = find_filter("custom_conv").filter_desc
    assert desc.startswith("convolution=")
    kernels = desc[len("convolution="):].split(":")
    assert kernels == ["0 0 0 0 1 0 0 0 0"] * 9


def test_find_filter_roundtrip():
    for f in available_filters():
        assert find_filter(f.name) is f


def test_unknown_filter_raises():
    with pytest.raises(KeyError):
        find_filter("posterize")


def test_custom_filter_equality():
    custom = ImageFilter("blur", "Simple blur filter", "boxblur=5:1")
    assert custom == BLUR