import pytest

from forest_fire import config
from forest_fire.cell import CellState
from forest_fire.config import SimulationConfig
from forest_fire.errors import InvalidDimension, InvalidProbability, OutOfBoundsIgnition
from forest_fire.model import ForestFireModel


def test_defaults():
    cfg = SimulationConfig()
    assert cfg.width == config.DEFAULT_WIDTH
    assert cfg.height == config.DEFAULT_HEIGHT
    assert cfg.propagation_prob == config.DEFAULT_PROPAGATION_PROB
    assert cfg.max_steps == config.DEFAULT_MAX_STEPS
    assert cfg.initial_fire == ()


def test_default_ignition_is_grid_centre():
    cfg = SimulationConfig(width=7, height=4)
    assert cfg.ignition_points() == ((2, 3),)
    model = cfg.build_model()
    assert isinstance(model, ForestFireModel)
    assert model.cell_state(2, 3) is CellState.Fire
    assert model.state_counts().fire == 1


def test_initial_fire_is_frozen_to_tuple():
    cfg = SimulationConfig(initial_fire=[(0, 0), (1, 1)])
    assert cfg.initial_fire == ((0, 0), (1, 1))
    assert cfg.ignition_points() == ((0, 0), (1, 1))


def test_seeded_configs_build_identical_runs():
    cfg = SimulationConfig(width=10, height=10, propagation_prob=0.5, seed=123)
    a, b = cfg.build_model(), cfg.build_model()
    for _ in range(10):
        a.step()
        b.step()
    assert a.get_forest_state() == b.get_forest_state()


@pytest.mark.parametrize(
    "kwargs,error",
    [
        ({"width": 0}, InvalidDimension),
        ({"height": -2}, InvalidDimension),
        ({"propagation_prob": 1.5}, InvalidProbability),
        ({"initial_fire": [(50, 50)]}, OutOfBoundsIgnition),
    ],
)
def test_invalid_config_fails_when_building(kwargs, error):
    cfg = SimulationConfig(**kwargs)
    with pytest.raises(error):
        cfg.build_model()


@pytest.mark.parametrize("max_steps", [0, -1, 2.5, True])
def test_invalid_max_steps(max_steps):
    with pytest.raises(ValueError):
        SimulationConfig(max_steps=max_steps)
