from typing import Callable

from PIL import Image, ImageOps

from ansigif.config import DitheringMode, ScaleMode, parse_scale_mode, pixel_factor

Scaler = Callable[[Image.Image, int, int], Image.Image]


def target_size(rows: int, columns: int, dithering: DitheringMode) -> tuple[int, int]:
    """Pixel (width, height) needed to fill ``rows`` x ``columns`` terminal characters."""
    fy, fx = pixel_factor(dithering)
    return columns * fx, rows * fy


def _resize(image: Image.Image, width: int, height: int) -> Image.Image:
    return image.resize((width, height), Image.LANCZOS)


def _fill(image: Image.Image, width: int, height: int) -> Image.Image:
    # Cover the area then crop around the centre
    return ImageOps.fit(image, (width, height), method=Image.LANCZOS, centering=(0.5, 0.5))


def _fit(image: Image.Image, width: int, height: int) -> Image.Image:
    return ImageOps.contain(image, (width, height), method=Image.LANCZOS)


_SCALERS: dict[ScaleMode, Scaler] = {
    ScaleMode.RESIZE: _resize,
    ScaleMode.FILL: _fill,
    ScaleMode.FIT: _fit,
}


def resolve_scaler(mode: ScaleMode | str) -> Scaler:
    """Look up the scaling policy for ``mode``; unknown modes raise ConfigError."""
    return _SCALERS[parse_scale_mode(mode)]


def scale_frame(image: Image.Image, width: int, height: int, mode: ScaleMode | str) -> Image.Image:
    return resolve_scaler(mode)(image, width, height)
