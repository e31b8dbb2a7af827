import threading
import time

import numpy as np
import pytest

from momosaic.badness import Badness
from momosaic.evolution import (
    DelayUpdate,
    EvolutionRunner,
    MosaicEvolution,
    MosaicUpdate,
    OptimizeUpdate,
)
from momosaic.images import TargetImage, Tile, create_test_image


class IdentityUpdate(MosaicUpdate):
    def update(self, model):
        pass


class RecordingUpdate(MosaicUpdate):
    def __init__(self, name, log):
        self.name = name
        self.log = log

    def update(self, model):
        self.log.append(self.name)


class ShiftUpdate(MosaicUpdate):
    def update(self, model):
        model.x[:] = model.x + 1.0


class ConstantBadness(Badness):
    def compute_badness(self, model, target_image):
        return 4.5


def make_tiles(n):
    return [Tile(np.zeros((30, 20, 4), dtype=np.uint8)) for _ in range(n)]


def test_model_is_empty_before_setting_initial_state():
    assert len(MosaicEvolution().current_model) == 0


def test_can_take_step_without_updaters():
    evolution = MosaicEvolution()
    evolution.take_step()
    assert len(evolution.current_model) == 0


def test_identity_update_does_not_change_model():
    evolution = MosaicEvolution()
    evolution.add_update(IdentityUpdate())
    evolution.construct_initial_state(create_test_image(), make_tiles(2))
    before = evolution.current_model.copy()
    evolution.take_step()
    after = evolution.current_model
    assert np.array_equal(before.x, after.x)
    assert np.array_equal(before.scales, after.scales)


def test_empty_initial_state_from_test_image():
    evolution = MosaicEvolution()
    evolution.add_update(IdentityUpdate())
    evolution.construct_initial_state(create_test_image(), [])
    assert len(evolution.current_model) == 0
    assert evolution.current_model.target_image.size == (22, 33)


def test_updates_run_in_order():
    log = []
    evolution = MosaicEvolution()
    evolution.add_update(RecordingUpdate("a", log))
    evolution.add_update(RecordingUpdate("b", log))
    evolution.take_step()
    evolution.take_step()
    assert log == ["a", "b", "a", "b"]


def test_delay_update_sleeps_and_leaves_model_unchanged():
    evolution = MosaicEvolution()
    evolution.construct_initial_state(TargetImage(None, (10, 10)), make_tiles(2))
    evolution.add_update(DelayUpdate(50))
    before = evolution.current_model.copy()
    start = time.monotonic()
    evolution.take_step()
    elapsed = time.monotonic() - start
    after = evolution.current_model
    assert elapsed >= 0.045
    assert len(after) == 2
    assert np.array_equal(before.x, after.x)
    assert np.array_equal(before.y, after.y)
    assert np.array_equal(before.scales, after.scales)


def test_delay_update_rejects_negative_delay():
    with pytest.raises(ValueError):
        DelayUpdate(-1)


def test_optimize_update_records_badness():
    evolution = MosaicEvolution()
    evolution.construct_initial_state(TargetImage(None, (10, 10)), make_tiles(1))
    update = OptimizeUpdate(ConstantBadness())
    evolution.add_update(update)
    evolution.take_step()
    assert update.last_badness == pytest.approx(4.5)


def test_optimize_update_without_badness_raises():
    with pytest.raises(ValueError):
        OptimizeUpdate().update(MosaicEvolution().current_model)


def test_runner_rejects_non_positive_period():
    with pytest.raises(ValueError):
        EvolutionRunner(MosaicEvolution(), notification_period=0)


def test_runner_notifies_every_period_with_copies():
    log = []
    evolution = MosaicEvolution()
    evolution.construct_initial_state(TargetImage(None, (10, 10)), make_tiles(1))
    evolution.add_update(ShiftUpdate())
    evolution.add_update(RecordingUpdate("step", log))
    seen = []

    def on_model_changed(model):
        seen.append(model)
        if len(seen) == 3:
            runner.stop()

    runner = EvolutionRunner(evolution, on_model_changed, notification_period=2)
    runner.run()
    assert len(log) == 5
    assert [float(m.x[0]) for m in seen] == [0.0, 2.0, 4.0]
    assert all(m is not evolution.current_model for m in seen)
    assert float(evolution.current_model.x[0]) == 5.0


def test_runner_in_background_thread_stops():
    evolution = MosaicEvolution()
    evolution.add_update(DelayUpdate(1))
    notified = threading.Event()
    runner = EvolutionRunner(evolution, lambda model: notified.set(), notification_period=1)
    runner.start()
    assert notified.wait(5.0)
    runner.stop()
    assert runner.join(5.0)