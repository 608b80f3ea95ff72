"""Style templates — the read-only reference table of architectural presets.

The table is built once at import and never mutated, so concurrent
requests read it without locking. Bump TEMPLATES_VERSION whenever a
preset value changes.
"""

from __future__ import annotations
import re

from dreamhouse import config
from dreamhouse.models import StyleTemplate

TEMPLATES_VERSION = 1

STYLE_TEMPLATES: tuple[StyleTemplate, ...] = (
    StyleTemplate(
        name="Brutalist",
        roof_type="flat",
        window_style="small",
        room_count=4,
        color="gray",
        texture="concrete",
        typical_ceiling_height=12.0,
        typical_stories=1,
        building_shape="rectangular",
        window_to_wall_ratio=0.10,
        foundation_type="slab",
        exterior_material="concrete",
        roof_pitch=0.0,
        has_parapet=True,
        has_eaves=False,
        eaves_overhang=0.0,
    ),
    StyleTemplate(
        name="Victorian",
        roof_type="gabled",
        window_style="ornate",
        room_count=6,
        color="cream",
        texture="wood",
        typical_ceiling_height=9.0,
        typical_stories=2,
        building_shape="l-shape",
        window_to_wall_ratio=0.20,
        foundation_type="crawlspace",
        exterior_material="wood siding",
        roof_pitch=8.0,
        has_parapet=False,
        has_eaves=True,
        eaves_overhang=2.0,
    ),
    StyleTemplate(
        name="Modern",
        roof_type="flat",
        window_style="large",
        room_count=5,
        color="white",
        texture="glass",
        typical_ceiling_height=10.0,
        typical_stories=2,
        building_shape="rectangular",
        window_to_wall_ratio=0.30,
        foundation_type="slab",
        exterior_material="stucco",
        roof_pitch=0.0,
        has_parapet=True,
        has_eaves=False,
        eaves_overhang=0.0,
    ),
)

STOP_WORDS = frozenset({
    "sq", "ft", "feet", "square", "a", "an", "the", "with", "and", "or",
    "in", "on", "at", "to", "for", "of", "is", "are",
})

_PUNCTUATION = re.compile(r"[^\w\s]")


def parse_keywords(prompt: str | None) -> list[str]:
    """
    Split a free-text style prompt into lower-case keywords.

    Punctuation becomes whitespace; stop words and single characters are
    dropped; duplicates are removed keeping first-seen order.
    """
    if not prompt or not prompt.strip():
        return []
    words = _PUNCTUATION.sub(" ", prompt).split()
    keywords: list[str] = []
    for word in words:
        word = word.lower()
        if len(word) > 1 and word not in STOP_WORDS and word not in keywords:
            keywords.append(word)
    return keywords


def get_template(name: str) -> StyleTemplate | None:
    """Exact (case-insensitive) lookup by template name."""
    wanted = name.strip().lower()
    for template in STYLE_TEMPLATES:
        if template.name.lower() == wanted:
            return template
    return None


def resolve_template(prompt: str | None) -> StyleTemplate:
    """
    Pick the template for a style prompt.

    The first keyword contained in a template name wins; with no match the
    configured default style is used, then the first template.
    """
    for keyword in parse_keywords(prompt):
        # Substring match: partial words like "brutal" hit, and so can
        # short fragments ("ic" selects Victorian)
        for template in STYLE_TEMPLATES:
            if keyword in template.name.lower():
                return template
    return get_template(config.DEFAULT_STYLE) or STYLE_TEMPLATES[0]
