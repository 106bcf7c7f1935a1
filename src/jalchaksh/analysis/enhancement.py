"""Basic underwater colour correction and display quality figures."""

import math

import numpy as np
from PIL import Image

from jalchaksh.models import QualityMetrics

# Water absorbs red first; boost red and green, pull back the blue cast.
CHANNEL_GAINS = np.array([1.3, 1.2, 0.9])


def enhance_image(image: Image.Image) -> Image.Image:
    """Return a colour-corrected RGBA copy of ``image``."""
    rgba = np.asarray(image.convert("RGBA"), dtype=np.float64)
    corrected = rgba.copy()
    corrected[..., :3] = np.minimum(255, np.rint(rgba[..., :3] * CHANNEL_GAINS))
    return Image.fromarray(corrected.astype(np.uint8))


def sample_quality_metrics(rng: np.random.Generator) -> QualityMetrics:
    """Draw plausible PSNR/SSIM/UIQM-style figures for display.

    These are not measured from the image.
    """
    return QualityMetrics(
        psnr=round(25 + rng.random() * 8, 2),
        ssim=round(0.8 + rng.random() * 0.15, 3),
        uiqm=round(2.5 + rng.random() * 1.5, 2),
        contrast=math.floor(85 + rng.random() * 15),
        sharpness=math.floor(75 + rng.random() * 25),
        colorfulness=math.floor(80 + rng.random() * 20),
    )
