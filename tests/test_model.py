import numpy as np
import pytest

from momosaic.images import TargetImage, Tile
from momosaic.model import MosaicModel

NUM_TILES = 10


@pytest.fixture
def model():
    m = MosaicModel()
    m.resize(NUM_TILES)
    return m


def _tile(width, height):
    return Tile(np.zeros((height, width, 4), dtype=np.uint8))


def test_new_model_is_empty():
    assert len(MosaicModel()) == 0


def test_resizing(model):
    model.resize(14)
    assert len(model) == 14
    assert len(model.x) == 14
    assert len(model.scales) == 14


def test_can_set_x_coords(model):
    model.x = [2.0] * NUM_TILES
    assert model.x[2] == pytest.approx(2.0)


def test_can_set_y_coords(model):
    model.y = [2.0] * NUM_TILES
    assert model.y[2] == pytest.approx(2.0)


def test_can_set_rotations(model):
    model.rotations = [2.0] * NUM_TILES
    assert model.rotations[2] == pytest.approx(2.0)


def test_can_set_scales(model):
    model.scales = [2.0] * NUM_TILES
    assert model.scales[2] == pytest.approx(2.0)


def test_cannot_set_too_many_values(model):
    model.x = [1.5] * NUM_TILES
    with pytest.raises(ValueError):
        model.x = [0.0] * (NUM_TILES + 1)
    assert len(model.x) == NUM_TILES
    assert model.x[0] == pytest.approx(1.5)


def test_cannot_set_too_few_values(model):
    model.x = [1.5] * NUM_TILES
    with pytest.raises(ValueError):
        model.x = [0.0] * (NUM_TILES - 1)
    assert len(model.x) == NUM_TILES
    assert model.x[0] == pytest.approx(1.5)


def test_arrays_can_be_modified_in_place(model):
    model.x[3] = 7.5
    assert model.x[3] == pytest.approx(7.5)


def test_initial_positions_are_inside_target(model):
    target_width, target_height = 50, 30
    target = TargetImage(np.zeros((40, 60, 4), dtype=np.uint8), (target_width, target_height))
    model.construct_initial_state(target, [Tile(), Tile()])
    assert len(model) == 2
    s = target.world_size
    min_x = -target_width / (2.0 * s)
    min_y = -target_height / (2.0 * s)
    for x, y in zip(model.x, model.y):
        assert min_x <= x <= -min_x
        assert min_y <= y <= -min_y


def test_initial_scales_fill_target_area():
    model = MosaicModel()
    target = TargetImage(None, (400, 300))
    model.construct_initial_state(target, [_tile(20, 30), _tile(20, 30)])
    assert list(model.scales) == pytest.approx([120.0, 120.0])
    assert list(model.rotations) == [0.0, 0.0]


def test_widths_and_heights_follow_scales():
    model = MosaicModel()
    model.construct_initial_state(TargetImage(None, (150, 100)), [_tile(20, 30)] * 2)
    model.scales = [1.0, 2.0]
    assert list(model.widths) == pytest.approx([20.0, 40.0])
    assert list(model.heights) == pytest.approx([30.0, 60.0])


def test_widths_limited_to_size_after_shrinking():
    model = MosaicModel()
    model.construct_initial_state(TargetImage(None, (150, 100)), [_tile(20, 30)] * 2)
    model.resize(1)
    assert len(model.widths) == 1


def test_empty_tile_list_gives_empty_model():
    model = MosaicModel()
    model.construct_initial_state(TargetImage(None, (22, 33)), [])
    assert len(model) == 0
    assert model.tiles == ()


def test_target_image_and_tiles_are_kept():
    target = TargetImage(None, (150, 100))
    tiles = [_tile(20, 30), _tile(10, 10)]
    model = MosaicModel()
    model.construct_initial_state(target, tiles)
    assert model.target_image is target
    assert model.tiles == tuple(tiles)


def test_copy_is_independent(model):
    model.x = [1.0] * NUM_TILES
    duplicate = model.copy()
    duplicate.x[0] = 5.0
    assert model.x[0] == pytest.approx(1.0)
    assert len(duplicate) == NUM_TILES


def test_negative_size_raises(model):
    with pytest.raises(ValueError):
        model.resize(-1)
    assert len(model) == NUM_TILES