"""
play_local.py — Play a scripted game WITHOUT a terminal
========================================================

Drives the RoundController directly with a presenter that prints
every call, answering each round on its own. Nothing is saved.

Run with:  python play_local.py
"""

import random

from car_counter import (
    GameConfig,
    GamePresenter,
    MemoryBestScoreStore,
    RoundController,
    ScoreTracker,
)


# ── A presenter that prints what a front end would draw ──────

class PrintingPresenter(GamePresenter):

    def display_item_count(self, count):
        print(f"    [display] {count} cars")

    def show_outcome(self, outcome):
        extra = " (new best)" if outcome.best_improved else ""
        print(f"    [outcome] {outcome.kind.value}: "
              f"answer was {outcome.correct_count}{extra}")

    def clear_outcome(self):
        pass

    def update_hud(self, snapshot):
        pass


def main():
    config = GameConfig()
    scores = ScoreTracker(MemoryBestScoreStore(), config.best_score_key)
    controller = RoundController(config, PrintingPresenter(), scores,
                                 rng=random.Random(21))

    print("=" * 50)
    print("  Scripted game: 5 rounds")
    print("=" * 50)

    controller.start_game()
    for round_number in range(1, 6):
        state = controller.state
        print(f"\n  Round {round_number}: up to {state.max_items_for_round} cars, "
              f"{state.time_limit_for_round}s")

        if round_number == 2:
            controller.submit_answer("lots")        # rejected, round stays open
            controller.submit_answer(state.current_item_count + 1)
        elif round_number == 4:
            for _ in range(state.time_limit_for_round):
                controller.timer.tick()             # let the clock run out
        else:
            controller.submit_answer(str(state.current_item_count))

        if round_number < 5:
            controller.advance_round()

    print(f"\n  Final score: {scores.score}  Best: {scores.best}")


if __name__ == "__main__":
    main()
