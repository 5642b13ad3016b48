# Area: Shared Tests
"""Shared fixtures: a recording presenter and controller factory."""

import random

import pytest

from car_counter.callbacks import GamePresenter
from car_counter.config import GameConfig
from car_counter._core.controller import RoundController
from car_counter._core.score_tracker import ScoreTracker
from car_counter._store.repo_best_score import MemoryBestScoreStore


class RecordingPresenter(GamePresenter):
    """Presenter that records every call for assertions."""

    def __init__(self):
        self.items = []
        self.outcomes = []
        self.huds = []
        self.clears = 0

    def display_item_count(self, count):
        self.items.append(count)

    def show_outcome(self, outcome):
        self.outcomes.append(outcome)

    def clear_outcome(self):
        self.clears += 1

    def update_hud(self, snapshot):
        self.huds.append(snapshot)


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def presenter():
    return RecordingPresenter()


@pytest.fixture
def store():
    return MemoryBestScoreStore()


@pytest.fixture
def make_controller(config, presenter, store):
    """Build a controller; pass best=N to pre-load a persisted best score."""

    def _make(best=None, seed=1234, cfg=None):
        cfg = cfg or config
        if best is not None:
            store.save_best(cfg.best_score_key, best)
        scores = ScoreTracker(store, cfg.best_score_key)
        return RoundController(
            config=cfg,
            presenter=presenter,
            scores=scores,
            rng=random.Random(seed),
        )

    return _make
