"""
Suggestion Renderer

Composes the replacement literal from the round-trip text and the original
literal's spelling. Purely textual.
"""

from .digits import split_suffix
from ..utils.config import SIGN_CHARS


def render_suggestion(original: str, suggested: str) -> str:
    """
    Replacement for ``original`` built on the round-trip text ``suggested``.

    The original's width suffix is re-attached exactly as written (``_f32``
    stays ``_f32``, ``f32`` stays ``f32``, none stays none), and an explicit
    ``+`` sign is kept.
    """
    suffix = split_suffix(original)[1]
    if original[:1] == "+" and suggested[:1] not in SIGN_CHARS:
        suggested = "+" + suggested
    return f"{suggested}{suffix}"
