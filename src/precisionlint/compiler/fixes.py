"""
Mechanical application of diagnostic suggestions.
"""

from typing import Iterable, List

from ..shared.errors import Diagnostic


def apply_suggestions(source: str, diagnostics: Iterable[Diagnostic]) -> str:
    """
    Replace each suggested span of ``source`` with its suggestion.

    Edits are applied right-to-left so earlier offsets stay valid. Diagnostics
    without a suggestion or a span are ignored; overlapping spans keep the
    first (leftmost-starting) edit.
    """
    edits: List[Diagnostic] = sorted(
        (d for d in diagnostics
         if d.suggestion is not None and d.location is not None and d.location.end > d.location.start),
        key=lambda d: d.location.start,
    )

    accepted: List[Diagnostic] = []
    last_end = -1
    for d in edits:
        if d.location.start < last_end:
            continue
        accepted.append(d)
        last_end = d.location.end

    for d in reversed(accepted):
        source = source[:d.location.start] + d.suggestion + source[d.location.end:]
    return source
