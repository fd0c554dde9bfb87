"""Fixed vocabulary tables that drive search queries and the build prompt.

These strings are part of the external contract: they feed live image search
and the generated document, so they must stay stable.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, TypeVar

V = TypeVar("V")


@dataclass(frozen=True)
class Palette:
    colors: tuple[str, ...]
    description: str


FEELING_QUERIES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "Calm & peaceful": ("minimal nature zen", "peaceful meditation", "calm minimal"),
    "Energetic & motivating": ("energetic fitness", "motivational workout", "vibrant energy"),
    "Professional & trustworthy": ("modern office clean", "professional business", "minimalist workspace"),
    "Fun & playful": ("colorful playful design", "fun creative", "vibrant playful"),
    "Luxurious & premium": ("luxury premium", "elegant sophisticated", "high-end design"),
    "Minimal & clean": ("minimal clean design", "simple aesthetic", "white space"),
    "Warm & friendly": ("warm cozy", "friendly welcoming", "soft comfortable"),
    "Bold & edgy": ("bold graphic design", "edgy modern", "striking contrast"),
})

INSPIRATION_QUERIES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "calm": ("zen minimal", "meditation peaceful"),
    "duolingo": ("playful colorful", "fun gamification"),
    "notion": ("organized clean workspace", "productivity minimal"),
    "instagram": ("modern aesthetic", "visual photography"),
    "headspace": ("friendly illustration", "approachable design"),
    "stripe": ("professional sleek", "modern gradient"),
})

COLOR_PALETTES: Mapping[str, Palette] = MappingProxyType({
    "soft-pastels": Palette(
        colors=("#FFB3BA", "#BAFFC9", "#BAE1FF", "#FFFFB3", "#E7B3FF"),
        description="soft pastel pinks, mint greens, and sky blues",
    ),
    "earth-tones": Palette(
        colors=("#8B7355", "#A0937D", "#C9B8A0", "#6B8E23", "#8FBC8F"),
        description="warm browns, sage greens, and natural tans",
    ),
    "bold-bright": Palette(
        colors=("#FF6B35", "#004E89", "#FFC43D", "#9C27B0", "#00BCD4"),
        description="vibrant oranges, deep blues, and sunny yellows",
    ),
    "monochrome": Palette(
        colors=("#000000", "#2C2C2C", "#808080", "#D3D3D3", "#FFFFFF"),
        description="classic blacks, grays, and whites",
    ),
    "ocean-vibes": Palette(
        colors=("#006BA6", "#0496FF", "#5DFDCB", "#1E88E5", "#00ACC1"),
        description="deep ocean blues, turquoise, and seafoam",
    ),
    "sunset": Palette(
        colors=("#9B59B6", "#E67E22", "#F39C12", "#E74C3C", "#FF6B9D"),
        description="rich purples, warm oranges, and sunset pinks",
    ),
})

DESIGN_STYLES: Mapping[str, str] = MappingProxyType({
    "calm": (
        "minimalist and zen-like, similar to meditation apps like Calm. "
        "Use lots of white space, gentle animations, and soothing colors."
    ),
    "duolingo": (
        "playful and gamified with bright colors, friendly illustrations, and "
        "engaging micro-interactions. Think fun, motivating, and slightly cartoonish."
    ),
    "notion": (
        "clean, organized, and highly functional. Embrace simple layouts, "
        "clear typography, and intuitive navigation patterns."
    ),
    "instagram": (
        "visual-first and modern with emphasis on images, stories, and "
        "contemporary UI patterns. Sleek and trendy."
    ),
    "headspace": (
        "friendly and illustrated with warm, approachable animations and "
        "character-driven design. Feels like a helpful companion."
    ),
    "stripe": (
        "professional and sleek with subtle gradients, sharp typography, and "
        "polished interactions. Corporate but not boring."
    ),
})

# Order matters: features are listed in this order.
FEATURE_PHRASES: tuple[tuple[str, str], ...] = (
    ("dark_mode", "dark mode support"),
    ("animations", "smooth animations and transitions"),
    ("illustrations", "custom illustrations or icons"),
    ("photos", "high-quality photos/imagery"),
    ("gradients", "gradient backgrounds or accents"),
    ("rounded_corners", "rounded corners on UI elements"),
)


def lookup(table: Mapping[str, V], key: str | None) -> V | None:
    """Return ``table[key]``, or None when the key is missing or unknown."""
    if key is None:
        return None
    return table.get(key)
