# Area: Shared
"""
car_counter._shared.display — Display constants for the terminal
================================================================

ANSI color codes, outcome message templates and the command table
used by the console presenter and the runner.
"""

# ══════════════════════════════════════════════════════════════
# ANSI COLOR CODES
# ══════════════════════════════════════════════════════════════

GREEN = "\033[32m"         # Correct answers
RED = "\033[31m"           # Wrong answers, timeouts, invalid input
YELLOW = "\033[33m"        # Time running low
ORANGE = "\033[38;5;208m"  # Time almost up
BOLD = "\033[1m"
RESET = "\033[0m"

# ══════════════════════════════════════════════════════════════
# OUTCOME KIND → MESSAGE
# ══════════════════════════════════════════════════════════════

OUTCOME_MESSAGES = {
    "correct": "Great! That's the right answer ✅",
    "incorrect": "Not quite! The answer was {correct_count}.",
    "timed_out": "Time's up! The answer was {correct_count}.",
    "validation_error": "Enter a valid whole number.",
}

NEW_BEST_MESSAGE = "New best score!"

NEXT_ROUND_HINT = "Press Enter (or n) for the next round."

# Correct answers are "ok", everything else "bad"
STYLE_COLORS = {
    "ok": GREEN,
    "bad": RED,
}

# HUD time level → color of the time value
TIME_LEVEL_COLORS = {
    "normal": "",
    "warn": YELLOW,
    "panic": ORANGE,
}

# ══════════════════════════════════════════════════════════════
# PLAYER COMMANDS
# ══════════════════════════════════════════════════════════════

COMMANDS = {
    "p": "play",
    "n": "next",
    "r": "restart",
    "m": "menu",
    "q": "quit",
}

MENU_TEXT = (
    "CAR COUNTER\n"
    "Count the items before the time runs out.\n"
    "  [p] play   [q] quit"
)

GAME_HELP = "Type your count and press Enter.  [n] next  [r] restart  [m] menu  [q] quit"
