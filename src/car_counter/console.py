# Area: Presentation
"""
car_counter.console — Terminal presenter
========================================

Renders the game to a text stream: the items as rows of icons, outcome
messages in green or red, and a one-line HUD whose time value turns
yellow, then orange, as the countdown runs low.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from ._core.outcome import RoundOutcome
from ._shared.display import (
    BOLD,
    GAME_HELP,
    MENU_TEXT,
    NEW_BEST_MESSAGE,
    OUTCOME_MESSAGES,
    RESET,
    STYLE_COLORS,
    TIME_LEVEL_COLORS,
)
from .callbacks import GamePresenter
from .types import HudSnapshot


class ConsolePresenter(GamePresenter):
    """
    GamePresenter that writes to a terminal.

    Args:
        stream: Where to write (defaults to stdout)
        icon: Glyph drawn once per item
        per_row: Icons per line
        color: Emit ANSI colors
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        icon: str = "🚗",
        per_row: int = 10,
        color: bool = True,
    ):
        if per_row <= 0:
            raise ValueError(f"per_row must be positive, got {per_row}")
        self.stream = stream or sys.stdout
        self.icon = icon
        self.per_row = per_row
        self.color = color
        self.message = ""
        self.last_hud: Optional[HudSnapshot] = None
        self._mid_line = False

    # ── GamePresenter ───────────────────────────────────────────

    def display_item_count(self, count: int) -> None:
        self._write("")
        for start in range(0, count, self.per_row):
            row = min(self.per_row, count - start)
            self._write(" ".join([self.icon] * row))
        self._write(GAME_HELP)

    def show_outcome(self, outcome: RoundOutcome) -> None:
        kind = outcome.kind.value
        text = OUTCOME_MESSAGES[kind].format(correct_count=outcome.correct_count)
        self.message = text
        style = "ok" if outcome.is_correct else "bad"
        self._write(self._paint(text, STYLE_COLORS[style]))
        if outcome.best_improved:
            self._write(self._paint(NEW_BEST_MESSAGE, BOLD))

    def clear_outcome(self) -> None:
        self.message = ""

    def update_hud(self, snapshot: HudSnapshot) -> None:
        previous = self.last_hud
        self.last_hud = snapshot
        # Ticks only change the time; redraw the line in place
        in_place = previous is not None and _same_except_time(previous, snapshot)
        line = self.format_hud(snapshot)
        if in_place:
            self.stream.write("\r\033[K" + line)
            self.stream.flush()
            self._mid_line = True
        else:
            self._write(line)

    # ── Screens outside the round lifecycle ─────────────────────

    def show_menu(self, best: int) -> None:
        self._write("")
        self._write(self._paint(MENU_TEXT, BOLD))
        self._write(f"Best: {best}")

    def show_notice(self, text: str) -> None:
        self._write(text)

    # ── Formatting ──────────────────────────────────────────────

    def format_hud(self, snapshot: HudSnapshot) -> str:
        time_text = self._paint(f"{snapshot['time_left']:>2}s",
                                TIME_LEVEL_COLORS[snapshot["time_level"]])
        return (
            f"Round {snapshot['round']} │ Score {snapshot['score']} │ "
            f"Best {snapshot['best']} │ Time {time_text}"
        )

    def _paint(self, text: str, color: str) -> str:
        if not self.color or not color:
            return text
        return f"{color}{text}{RESET}"

    def _write(self, line: str) -> None:
        if self._mid_line:
            self.stream.write("\n")
            self._mid_line = False
        self.stream.write(line + "\n")
        self.stream.flush()


def _same_except_time(a: HudSnapshot, b: HudSnapshot) -> bool:
    return (a["round"], a["score"], a["best"]) == (b["round"], b["score"], b["best"])
