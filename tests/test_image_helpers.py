import io
import random

import pytest
from docminder.ocr import (
    OCR_IMAGE_PADDING,
    InvalidImageError,
    analyze_image_quality,
    estimate_skew_angle,
    otsu_threshold,
    preprocess_image_bytes,
)
from PIL import Image, ImageDraw


def _png_bytes(size: tuple[int, int], color: str = "white") -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format="PNG")
    return buffer.getvalue()


def test_large_image_is_resized_and_padded() -> None:
    result = preprocess_image_bytes(_png_bytes((4000, 2000)))

    assert result.original_size == (4000, 2000)
    assert result.applied_operations == ["grayscale", "contrast", "resize", "padding"]
    assert result.processed_size == (3000 + 2 * OCR_IMAGE_PADDING, 1500 + 2 * OCR_IMAGE_PADDING)

    processed = Image.open(io.BytesIO(result.image_bytes))
    assert processed.format == "JPEG"
    assert processed.mode == "L"
    assert processed.size == result.processed_size


def test_small_image_keeps_its_size() -> None:
    result = preprocess_image_bytes(_png_bytes((800, 600), "gray"), grayscale=False, padding=0)

    assert result.applied_operations == ["contrast"]
    assert result.processed_size == (800, 600)
    assert Image.open(io.BytesIO(result.image_bytes)).mode == "RGB"


def test_portrait_image_fits_longer_side() -> None:
    result = preprocess_image_bytes(
        _png_bytes((1000, 4000)),
        enhance_contrast=False,
        max_dimension=2000,
        padding=0,
    )

    assert result.applied_operations == ["grayscale", "resize"]
    assert result.processed_size == (500, 2000)


def _ruled_page(size: int = 400) -> Image.Image:
    """White page with thick horizontal black bars, like lines of text."""
    page = Image.new("L", (size, size), 255)
    draw = ImageDraw.Draw(page)
    for top in range(40, size - 40, 20):
        draw.rectangle([40, top, size - 40, top + 4], fill=0)
    return page


def _encode(img: Image.Image) -> bytes:
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


def test_non_image_bytes_raise() -> None:
    with pytest.raises(InvalidImageError, match="Not a readable image"):
        preprocess_image_bytes(b"%PDF-1.7 not really an image")


def test_optional_steps_run_in_order() -> None:
    result = preprocess_image_bytes(
        _encode(_ruled_page()),
        deskew=True,
        denoise=True,
        sharpen=True,
        threshold=True,
        padding=0,
    )

    assert result.applied_operations == ["grayscale", "deskew", "denoise", "contrast", "sharpen", "threshold"]


def test_denoise_removes_isolated_dots() -> None:
    page = Image.new("L", (60, 60), 255)
    page.putpixel((30, 30), 0)

    result = preprocess_image_bytes(_encode(page), denoise=True, enhance_contrast=False, padding=0)

    assert Image.open(io.BytesIO(result.image_bytes)).getpixel((30, 30)) > 200


def test_threshold_binarizes() -> None:
    page = Image.new("L", (100, 100), 200)
    ImageDraw.Draw(page).rectangle([0, 0, 49, 99], fill=60)

    result = preprocess_image_bytes(_encode(page), enhance_contrast=False, threshold=True, padding=0)

    processed = Image.open(io.BytesIO(result.image_bytes))
    # JPEG leaves small ringing around the edge
    assert processed.getpixel((10, 50)) < 20
    assert processed.getpixel((90, 50)) > 235


def test_otsu_threshold_splits_two_levels() -> None:
    histogram = [0] * 256
    histogram[60] = 500
    histogram[200] = 500

    assert otsu_threshold(histogram) == 60


def test_otsu_threshold_of_flat_image_defaults_to_midpoint() -> None:
    histogram = [0] * 256
    histogram[128] = 1000

    assert otsu_threshold(histogram) == 128


def test_estimate_skew_angle_finds_rotation() -> None:
    skewed = _ruled_page().rotate(3, fillcolor=255)

    assert estimate_skew_angle(skewed) == pytest.approx(-3, abs=0.5)


def test_estimate_skew_angle_of_straight_page() -> None:
    assert abs(estimate_skew_angle(_ruled_page())) <= 0.5


def test_quality_of_flat_image() -> None:
    quality = analyze_image_quality(_png_bytes((200, 200), "gray"))

    assert quality.quality == "low"
    assert quality.contrast == 0.0
    assert quality.sharpness == 0.0
    assert quality.noise == 1.0
    assert quality.recommendations == [
        "Enable contrast enhancement",
        "Enable sharpening",
        "Use higher resolution image if available",
    ]


def test_quality_flags_noise() -> None:
    rng = random.Random(7)
    noisy = Image.frombytes("L", (1000, 1000), bytes(rng.randrange(256) for _ in range(1000 * 1000)))

    quality = analyze_image_quality(_encode(noisy))

    assert quality.contrast > 0.9
    assert quality.noise < 0.5
    assert "Enable denoising" in quality.recommendations
    assert "Use higher resolution image if available" not in quality.recommendations


def test_quality_of_high_contrast_page() -> None:
    page = Image.new("L", (1200, 1200), 255)
    ImageDraw.Draw(page).rectangle([0, 0, 599, 1199], fill=0)

    quality = analyze_image_quality(_encode(page))

    assert quality.contrast == 1.0
    assert quality.noise > 0.9
    assert "Enable contrast enhancement" not in quality.recommendations


def test_quality_rejects_non_image() -> None:
    with pytest.raises(InvalidImageError):
        analyze_image_quality(b"hello")
