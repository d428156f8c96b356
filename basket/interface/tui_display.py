"""Display-width helpers (wide glyphs such as emoji count as two cells)."""

from typing import List, Tuple

from wcwidth import wcwidth

Fragments = List[Tuple[str, str]]


def display_width(text: str) -> int:
    """Return visual width of text accounting for wide/narrow characters."""
    width = 0
    for ch in text:
        w = wcwidth(ch)
        if w is None or w < 0:
            w = 0
        width += w
    return width


def trim_display(text: str, width: int) -> str:
    """Trim text so visible width doesn't exceed specified width."""
    acc = []
    used = 0
    for ch in text:
        w = wcwidth(ch) or 0
        if w < 0:
            w = 0
        if used + w > width:
            break
        acc.append(ch)
        used += w
    return "".join(acc)


def pad_display(text: str, width: int) -> str:
    """Trim and pad with spaces to exact visible width."""
    trimmed = trim_display(text, width)
    return trimmed + " " * max(0, width - display_width(trimmed))


def center_display(text: str, width: int) -> str:
    trimmed = trim_display(text, width)
    gap = max(0, width - display_width(trimmed))
    left = gap // 2
    return " " * left + trimmed + " " * (gap - left)


def fragments_width(fragments: Fragments) -> int:
    return sum(display_width(text) for _, text in fragments)


def pad_fragments(fragments: Fragments, width: int) -> Fragments:
    missing = width - fragments_width(fragments)
    if missing > 0:
        return list(fragments) + [("", " " * missing)]
    return list(fragments)


__all__ = [
    "Fragments",
    "display_width",
    "trim_display",
    "pad_display",
    "center_display",
    "fragments_width",
    "pad_fragments",
]
