import pytest
from pydantic import ValidationError

from tower.config import TowerConfig


def test_defaults():
    config = TowerConfig()

    assert config.max_disks == 7
    assert config.move_limit == 128
    assert (config.size_tries, config.disk_tries, config.needle_tries) == (3, 3, 2)


def test_move_limit_follows_max_disks():
    assert TowerConfig(max_disks=3).move_limit == 8


@pytest.mark.parametrize("field, value", [("max_disks", 2), ("size_tries", 0), ("needle_tries", -1)])
def test_rejects_out_of_range_values(field, value):
    with pytest.raises(ValidationError):
        TowerConfig(**{field: value})


def test_is_frozen():
    config = TowerConfig()

    with pytest.raises(ValidationError):
        config.max_disks = 9
