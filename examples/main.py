"""
main.py — Play Car Counter in your terminal
============================================

This is the entry point. Adjust the difficulty below and run.

    python main.py

The runner will:
  1. Show the menu with your best score
  2. Draw the cars for each round and start the countdown
  3. Judge every count you type
  4. Save a new best score to car_counter.db

Press q (or Ctrl+C) to stop.
"""

from car_counter import GameRunner

# ── Configuration ──
config = {
    # Where the best score and the JSON log go
    "db_path": "car_counter.db",
    "log_file": "car_counter.log",

    # Round 1: 3 to 18 cars in 14 seconds
    "min_items": 3,
    "start_max_items": 18,
    "start_time_limit": 14,

    # Each round: 2 more cars at most, 1 second less (never under 6s)
    "max_items_increment": 2,
    "time_decrement": 1,
    "min_time_limit": 6,
    "max_items_cap": 60,

    # Same seed, same cars
    "seed": None,
}

# ── Run ──
runner = GameRunner(config=config)
runner.run()
