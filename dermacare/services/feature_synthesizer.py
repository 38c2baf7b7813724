import logging
from dermacare.models import FeatureVector
from dermacare.config import LCG_MULTIPLIER, LCG_INCREMENT, LCG_MODULUS, FEATURE_STREAM_SEEDS

logger = logging.getLogger(__name__)


def create_image_hash(image_uri: str) -> int:
    """
    Polynomial rolling hash (h = h * 31 + c) over UTF-16 code units,
    truncated to a signed 32-bit integer. Returns the absolute value,
    so the result is in [0, 2**31].
    """
    raw = image_uri.encode("utf-16-le", "surrogatepass")
    h = 0
    for i in range(0, len(raw), 2):
        code_unit = raw[i] | (raw[i + 1] << 8)
        h = (h * 31 + code_unit) & 0xFFFFFFFF
    if h & 0x80000000:
        h -= 0x100000000
    return abs(h)


class SeededRandom:
    """Linear-congruential generator. Output depends only on the seed and call count."""

    def __init__(self, seed: int):
        self.seed = seed

    def next(self) -> float:
        self.seed = (self.seed * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        return self.seed / LCG_MODULUS

    def range(self, low: float, high: float) -> float:
        return low + self.next() * (high - low)


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def _stream(image_hash: int, cluster: str) -> SeededRandom:
    multiplier, offset = FEATURE_STREAM_SEEDS[cluster]
    return SeededRandom(image_hash * multiplier + offset)


def synthesize_features(image_uri: str) -> FeatureVector:
    """
    Derives a reproducible 16-feature vector from an image identifier.

    Four independent streams (color, texture, pattern, clinical) are seeded
    from the identifier hash. The draw order inside each stream is part of the
    contract: reordering any draw changes every later value of that stream.
    """
    image_hash = create_image_hash(image_uri)

    color = _stream(image_hash, "color")
    texture_rng = _stream(image_hash, "texture")
    pattern = _stream(image_hash, "pattern")
    clinical = _stream(image_hash, "clinical")

    # Color
    brightness = color.range(0.20, 0.90)
    redness = color.range(0.10, 0.85)
    color_variation = color.range(0.15, 0.75)
    saturation = _clamp(redness * color.range(0.7, 1.3))

    # Texture
    texture = texture_rng.range(0.05, 0.95)
    contrast = texture_rng.range(0.25, 0.95)
    edge_sharpness = texture_rng.range(0.30, 0.90)
    granularity = _clamp(texture * texture_rng.range(0.6, 1.4))

    # Pattern; uniformity is inversely related to color variation
    symmetry = pattern.range(0.20, 0.90)
    distribution = pattern.range(0.25, 0.85)
    density = pattern.range(0.20, 0.80)
    uniformity = _clamp(1 - (color_variation * 0.9 + pattern.range(-0.1, 0.1)))

    # Clinical composites
    inflammation_base = redness * 0.50 + texture * 0.30 + (1 - uniformity) * 0.20
    inflammation = _clamp(inflammation_base * clinical.range(0.85, 1.15))
    asymmetry = _clamp((1 - symmetry) * clinical.range(0.9, 1.1))
    border = _clamp((asymmetry * 0.6 + texture * 0.4) * clinical.range(0.8, 1.2))
    diameter = _clamp((distribution * 0.6 + density * 0.4) * clinical.range(0.85, 1.15))

    logger.debug(f"Synthesized features for hash {image_hash}")

    return FeatureVector(
        brightness=brightness,
        redness=redness,
        color_variation=color_variation,
        saturation=saturation,
        texture=texture,
        edge_sharpness=edge_sharpness,
        contrast=contrast,
        granularity=granularity,
        uniformity=uniformity,
        symmetry=symmetry,
        distribution=distribution,
        density=density,
        inflammation=inflammation,
        asymmetry=asymmetry,
        border=border,
        diameter=diameter,
    )
