from __future__ import annotations

import tkinter as tk

from lavajump.domain.actors import ActorType
from lavajump.domain.cells import CellKind
from lavajump.domain.snapshot import ActorView, LevelSnapshot, Status
from lavajump.ui.viewport import Viewport, scroll_into_view

_SKY = "#34a6fb"
_CELL_FILL = {
    CellKind.WALL: "#ffffff",
    CellKind.LAVA: "#ff6464",
}
_ACTOR_FILL = {
    ActorType.PLAYER: "#000000",
    ActorType.COIN: "#f1e559",
    ActorType.LAVA: "#ff6464",
}
_PLAYER_LOST = "#dd0000"
_PLAYER_WON_OUTLINE = "#ffffff"


class TkCanvasView:
    """
    Draws level snapshots on a Tk canvas: static cells once per level, actors
    every frame, scrolled so the player stays in view.
    """

    def __init__(self, root: tk.Misc, *, width: int, height: int, scale: int = 20) -> None:
        self._scale = scale
        self._view = Viewport(left=0.0, top=0.0, width=float(width), height=float(height))
        self._content_w = 0.0
        self._content_h = 0.0

        self.canvas = tk.Canvas(
            root,
            width=width,
            height=height,
            highlightthickness=0,
            background=_SKY,
            xscrollincrement=1,
            yscrollincrement=1,
        )
        self.canvas.pack(fill="both", expand=True)

        self._text_id = self.canvas.create_text(10, 10, anchor="nw", text="", font=("TkDefaultFont", 12))

    def show_level(self, snap: LevelSnapshot) -> None:
        """Reset the canvas for a new level and draw its background."""
        s = self._scale
        self.canvas.delete("background", "actor")
        self._content_w = float(snap.width * s)
        self._content_h = float(snap.height * s)
        self.canvas.configure(scrollregion=(0, 0, self._content_w, self._content_h))
        self._view = Viewport(left=0.0, top=0.0, width=self._view.width, height=self._view.height)

        for y, row in enumerate(snap.grid):
            for x, kind in enumerate(row):
                fill = _CELL_FILL.get(kind)
                if fill is None:
                    continue
                self.canvas.create_rectangle(
                    x * s, y * s, (x + 1) * s, (y + 1) * s,
                    outline="", fill=fill, tags=("background",),
                )
        self.render(snap)

    def render(self, snap: LevelSnapshot) -> None:
        # Actors are few; redrawing them all is simpler than tracking ids.
        self.canvas.delete("actor")
        for a in snap.actors:
            self._draw_actor(a, snap.status)

        self._scroll_to(snap)

        self.canvas.itemconfigure(self._text_id, text=self._status_text(snap))
        self.canvas.tag_raise(self._text_id)

    def _draw_actor(self, a: ActorView, status: Status | None) -> None:
        s = self._scale
        x1, y1 = a.pos.x * s, a.pos.y * s
        x2, y2 = (a.pos.x + a.size.x) * s, (a.pos.y + a.size.y) * s
        fill = _ACTOR_FILL[a.type]
        outline = ""

        if a.type is ActorType.PLAYER:
            if status is Status.LOST:
                fill = _PLAYER_LOST
            elif status is Status.WON:
                outline = _PLAYER_WON_OUTLINE

        if a.type is ActorType.COIN:
            self.canvas.create_oval(x1, y1, x2, y2, outline="", fill=fill, tags=("actor",))
        else:
            self.canvas.create_rectangle(x1, y1, x2, y2, outline=outline, width=3, fill=fill, tags=("actor",))

    def _scroll_to(self, snap: LevelSnapshot) -> None:
        center = snap.player.pos.plus(snap.player.size.times(0.5)).times(self._scale)
        self._view = scroll_into_view(
            self._view,
            center,
            content_width=self._content_w,
            content_height=self._content_h,
        )
        if self._content_w > 0:
            self.canvas.xview_moveto(self._view.left / self._content_w)
        if self._content_h > 0:
            self.canvas.yview_moveto(self._view.top / self._content_h)
        # Keep the HUD pinned to the visible corner.
        self.canvas.coords(self._text_id, self._view.left + 10, self._view.top + 10)

    @staticmethod
    def _status_text(snap: LevelSnapshot) -> str:
        if snap.status is Status.WON:
            return "You won!"
        if snap.status is Status.LOST:
            return "Ouch."
        return f"coins left: {snap.coins_left}"
