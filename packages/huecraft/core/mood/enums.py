"""Mood vocabulary - categorical descriptors of a single color."""

from enum import Enum


class Energy(str, Enum):
    """How loud a color is, read from chroma."""

    WHISPER = "whisper"  # Nearly neutral
    MUTED = "muted"  # Dusty, desaturated
    MODERATE = "moderate"
    VIBRANT = "vibrant"
    ELECTRIC = "electric"


class Depth(str, Enum):
    """How dark or light a color sits, read from lightness."""

    ABYSS = "abyss"  # Almost black
    DEEP = "deep"
    GROUNDED = "grounded"
    AIRY = "airy"
    SOFT = "soft"  # Pastel territory
    ETHEREAL = "ethereal"


class Temperature(str, Enum):
    """Perceived temperature from hue and chroma together."""

    NEUTRAL = "neutral"  # Too desaturated to read
    WARM = "warm"
    HOT = "hot"
    COOL = "cool"
    ICY = "icy"
    FRESH = "fresh"  # Green zone
    COMPLEX = "complex"  # Magenta/violet zone


class Mood(str, Enum):
    """Vibe family combining energy, depth and temperature."""

    MOODY = "moody"
    DREAMY = "dreamy"
    JEWEL = "jewel"
    POP = "pop"
    EARTHY = "earthy"
    SERENE = "serene"
    ETHEREAL = "ethereal"
    NOIR = "noir"
    BOTANICAL = "botanical"
    BALANCED = "balanced"


class HueSpread(str, Enum):
    """How far companion hues roam from the base hue."""

    MINIMAL = "minimal"
    GENTLE = "gentle"
    MODERATE = "moderate"
    WIDE = "wide"
    ORGANIC = "organic"


class TemperatureBias(str, Enum):
    """Hue adjustment applied to companions after spreading."""

    PRESERVE = "preserve"
    SOFTEN = "soften"
    CONTRAST = "contrast"
    COMPLEMENT = "complement"
    WARM = "warm"
    COOL = "cool"
    FRESH = "fresh"
