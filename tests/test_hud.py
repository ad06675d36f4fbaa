import pytest

from batcave.hud import Hud


def test_initial_row():
    hud = Hud()
    assert hud.row(0).startswith(" ENERGY ||||||||||   GEMS 000")


def test_gem_collected_accumulates():
    hud = Hud()
    hud.gem_collected(1)
    hud.gem_collected(1)
    assert hud.player_gems == 2
    assert hud.row(0)[26:29] == "002"


def test_gem_counter_wraps():
    hud = Hud()
    hud.gem_collected(255)
    hud.gem_collected(1)
    assert hud.player_gems == 0


def test_update_health():
    hud = Hud()
    hud.update_health(3)
    assert hud.row(0)[7:17] == "|||" + " " * 7


@pytest.mark.parametrize("value", [-1, 11])
def test_update_health_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        Hud().update_health(value)