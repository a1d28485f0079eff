"""Image preprocessing applied before a document is sent to OCR."""

import io
import math
from dataclasses import dataclass, field
from typing import Literal

from PIL import Image, ImageFilter, ImageOps, ImageStat, UnidentifiedImageError

MAX_IMAGE_DIMENSION = 3000  # Resize if either dimension exceeds this
OCR_IMAGE_PADDING = 50  # White padding around image to prevent edge truncation

MAX_SKEW_DEGREES = 5.0
SKEW_STEP_DEGREES = 0.5
SKEW_SAMPLE_DIMENSION = 200  # Skew is estimated on a thumbnail this size
MIN_SKEW_CORRECTION = 0.5
DARK_PIXEL_CUTOFF = 128

MIN_QUALITY_RESOLUTION = 1000

ImageQualityLevel = Literal["low", "medium", "high"]


class InvalidImageError(ValueError):
    """Raised when uploaded bytes cannot be decoded as an image."""


@dataclass(frozen=True)
class PreprocessingResult:
    """Preprocessed JPEG bytes plus what was done to them."""

    image_bytes: bytes
    original_size: tuple[int, int]
    processed_size: tuple[int, int]
    applied_operations: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ImageQuality:
    """OCR suitability of an image; every metric is in [0, 1], higher is better."""

    quality: ImageQualityLevel
    contrast: float
    sharpness: float
    noise: float
    recommendations: list[str] = field(default_factory=list)


def open_image(image_bytes: bytes) -> Image.Image:
    """Decode image bytes, raising InvalidImageError for anything Pillow cannot read."""
    try:
        img = Image.open(io.BytesIO(image_bytes))
        img.load()
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidImageError(f"Not a readable image: {e}") from e
    return img


def _fit_within(width: int, height: int, max_dimension: int) -> tuple[int, int]:
    """Scale (width, height) down so the longer side equals max_dimension."""
    if width > height:
        return max_dimension, int(height * (max_dimension / width))
    return int(width * (max_dimension / height)), max_dimension


def otsu_threshold(histogram: list[int]) -> int:
    """Return the gray level that best splits a 256-bin histogram into two classes."""
    total = sum(histogram)
    weighted_total = sum(level * count for level, count in enumerate(histogram))

    best_level = 128
    best_variance = 0.0
    background_weight = 0
    background_sum = 0
    for level, count in enumerate(histogram):
        background_weight += count
        if background_weight == 0:
            continue
        foreground_weight = total - background_weight
        if foreground_weight == 0:
            break
        background_sum += level * count
        background_mean = background_sum / background_weight
        foreground_mean = (weighted_total - background_sum) / foreground_weight
        variance = background_weight * foreground_weight * (background_mean - foreground_mean) ** 2
        if variance > best_variance:
            best_variance = variance
            best_level = level
    return best_level


def _row_profile_variance(img: Image.Image) -> float:
    """Variance of dark-pixel counts per row of an L image."""
    width, height = img.size
    data = img.tobytes()
    profile = [
        sum(1 for value in data[row * width : (row + 1) * width] if value < DARK_PIXEL_CUTOFF) for row in range(height)
    ]
    mean = sum(profile) / height
    return sum((count - mean) ** 2 for count in profile) / height


def estimate_skew_angle(img: Image.Image) -> float:
    """
    Estimate the rotation (degrees, counter-clockwise) that straightens text lines.

    Candidate angles within +/-5 degrees are tried on a grayscale thumbnail;
    the one whose rows are most sharply split into ink and paper wins.
    """
    sample = ImageOps.grayscale(img)
    sample.thumbnail((SKEW_SAMPLE_DIMENSION, SKEW_SAMPLE_DIMENSION))

    best_angle = 0.0
    best_variance = -1.0
    steps = int(MAX_SKEW_DEGREES / SKEW_STEP_DEGREES)
    # 0 first so a flat profile keeps the image as is
    candidates = [0.0] + [step * SKEW_STEP_DEGREES for step in range(-steps, steps + 1) if step != 0]
    for angle in candidates:
        variance = _row_profile_variance(sample.rotate(angle, fillcolor=255))
        if variance > best_variance:
            best_variance = variance
            best_angle = angle
    return best_angle


def _deskew(img: Image.Image) -> Image.Image:
    angle = estimate_skew_angle(img)
    if abs(angle) <= MIN_SKEW_CORRECTION:
        return img
    fill = 255 if img.mode == "L" else (255, 255, 255)
    return img.rotate(angle, resample=Image.Resampling.BICUBIC, fillcolor=fill)


def preprocess_image_bytes(
    image_bytes: bytes,
    *,
    grayscale: bool = True,
    deskew: bool = False,
    denoise: bool = False,
    enhance_contrast: bool = True,
    sharpen: bool = False,
    threshold: bool = False,
    max_dimension: int = MAX_IMAGE_DIMENSION,
    padding: int = OCR_IMAGE_PADDING,
) -> PreprocessingResult:
    """
    Prepare a scanned document image for OCR.

    EXIF orientation is always applied. Optional steps run in this order:
    grayscale, deskew, denoise, contrast stretch, sharpen, Otsu threshold,
    downscale to max_dimension, white padding.

    Args:
        image_bytes: Image data as bytes (any format Pillow can open)
        grayscale: Convert to 8-bit grayscale
        deskew: Straighten text rotated by up to 5 degrees
        denoise: 3x3 median filter
        enhance_contrast: Stretch the histogram to the full 0-255 range
        sharpen: Pillow's sharpen kernel
        threshold: Binarize to black and white at the Otsu level
        max_dimension: Maximum allowed width or height
        padding: White border added on every side (pixels)

    Returns:
        PreprocessingResult with JPEG bytes

    Raises:
        InvalidImageError: if the bytes are not an image
    """
    img = open_image(image_bytes)
    original_size = img.size
    applied: list[str] = []

    img = ImageOps.exif_transpose(img)
    # Filters and autocontrast need L or RGB input
    if img.mode not in ("L", "RGB"):
        img = img.convert("RGB")

    if grayscale:
        img = ImageOps.grayscale(img)
        applied.append("grayscale")

    if deskew:
        img = _deskew(img)
        applied.append("deskew")

    if denoise:
        img = img.filter(ImageFilter.MedianFilter(3))
        applied.append("denoise")

    if enhance_contrast:
        img = ImageOps.autocontrast(img)
        applied.append("contrast")

    if sharpen:
        img = img.filter(ImageFilter.SHARPEN)
        applied.append("sharpen")

    if threshold:
        img = ImageOps.grayscale(img)
        cutoff = otsu_threshold(img.histogram())
        img = img.point(lambda value: 255 if value > cutoff else 0)
        applied.append("threshold")

    width, height = img.size
    if width > max_dimension or height > max_dimension:
        img = img.resize(_fit_within(width, height, max_dimension), Image.Resampling.LANCZOS)
        applied.append("resize")

    if padding > 0:
        img = ImageOps.expand(img, border=padding, fill="white")
        applied.append("padding")

    buffer = io.BytesIO()
    img.convert("L" if grayscale or threshold else "RGB").save(buffer, format="JPEG", quality=95)
    return PreprocessingResult(
        image_bytes=buffer.getvalue(),
        original_size=original_size,
        processed_size=img.size,
        applied_operations=applied,
    )


def _absolute_response(img: Image.Image, kernel: list[int], scale: int) -> tuple[float, float]:
    """Return (mean, mean of squares) of |kernel * img| over the interior of an L image.

    Pillow clips filter output at 0, so the positive and negated kernels are
    applied separately and their responses added. Border pixels are copied
    unfiltered by Pillow and are left out.
    """
    width, height = img.size
    if width < 3 or height < 3:
        return 0.0, 0.0
    interior = (1, 1, width - 1, height - 1)
    positive = ImageStat.Stat(img.filter(ImageFilter.Kernel((3, 3), kernel, scale=scale)).crop(interior))
    negative = ImageStat.Stat(img.filter(ImageFilter.Kernel((3, 3), [-k for k in kernel], scale=scale)).crop(interior))
    pixels = (width - 2) * (height - 2)
    mean = (positive.sum[0] + negative.sum[0]) / pixels
    mean_square = (positive.sum2[0] + negative.sum2[0]) / pixels
    return mean, mean_square


def analyze_image_quality(image_bytes: bytes) -> ImageQuality:
    """
    Score an image's OCR suitability and suggest preprocessing steps.

    contrast: gray range / 255. sharpness: RMS of the Laplacian / 100.
    noise: 1 - mean distance to the 8-neighbour mean / 30. The overall level
    is "high" above an average of 0.7, "medium" above 0.4, else "low".

    Raises:
        InvalidImageError: if the bytes are not an image
    """
    img = open_image(image_bytes)
    gray = ImageOps.grayscale(ImageOps.exif_transpose(img).convert("RGB"))
    width, height = gray.size

    low, high = gray.getextrema()
    contrast = (high - low) / 255

    _, laplacian_square = _absolute_response(gray, [0, -1, 0, -1, 4, -1, 0, -1, 0], scale=1)
    sharpness = min(1.0, math.sqrt(laplacian_square) / 100)

    neighbour_distance, _ = _absolute_response(gray, [-1, -1, -1, -1, 8, -1, -1, -1, -1], scale=8)
    noise = 1 - min(1.0, neighbour_distance / 30)

    average = (contrast + sharpness + noise) / 3
    quality: ImageQualityLevel
    if average > 0.7:
        quality = "high"
    elif average > 0.4:
        quality = "medium"
    else:
        quality = "low"

    recommendations: list[str] = []
    if contrast < 0.4:
        recommendations.append("Enable contrast enhancement")
    if sharpness < 0.3:
        recommendations.append("Enable sharpening")
    if noise < 0.5:
        recommendations.append("Enable denoising")
    if width < MIN_QUALITY_RESOLUTION or height < MIN_QUALITY_RESOLUTION:
        recommendations.append("Use higher resolution image if available")

    return ImageQuality(
        quality=quality,
        contrast=contrast,
        sharpness=sharpness,
        noise=noise,
        recommendations=recommendations,
    )
