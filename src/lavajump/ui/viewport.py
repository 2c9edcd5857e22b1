from __future__ import annotations

from dataclasses import dataclass

from lavajump.domain.vector import Vector


@dataclass(frozen=True)
class Viewport:
    """Visible window over the level, in pixels."""
    left: float
    top: float
    width: float
    height: float


def scroll_into_view(
    view: Viewport,
    target: Vector,
    *,
    content_width: float,
    content_height: float,
) -> Viewport:
    """
    Scroll just enough to keep `target` (pixels) at least a third of the
    view's width away from every edge, without scrolling past the content.
    """
    margin = view.width / 3
    left, top = view.left, view.top

    if target.x < left + margin:
        left = target.x - margin
    elif target.x > left + view.width - margin:
        left = target.x + margin - view.width

    if target.y < top + margin:
        top = target.y - margin
    elif target.y > top + view.height - margin:
        top = target.y + margin - view.height

    left = _clamp(left, 0.0, max(0.0, content_width - view.width))
    top = _clamp(top, 0.0, max(0.0, content_height - view.height))
    return Viewport(left=left, top=top, width=view.width, height=view.height)


def _clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))
