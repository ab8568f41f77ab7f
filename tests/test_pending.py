import pytest

from hubspace import PendingColorState


def test_starts_empty():
    pending = PendingColorState()
    assert pending.hue is None
    assert pending.saturation is None
    assert not pending.is_complete()


@pytest.mark.parametrize("hue_first", [True, False])
def test_complete_in_either_order(hue_first):
    pending = PendingColorState()
    if hue_first:
        pending.set_hue(240)
        assert not pending.is_complete()
        pending.set_saturation(80)
    else:
        pending.set_saturation(80)
        assert not pending.is_complete()
        pending.set_hue(240)

    assert pending.is_complete()
    assert pending.consume() == (240, 80)
    assert not pending.is_complete()
    assert pending.hue is None
    assert pending.saturation is None


def test_overwrite_keeps_latest():
    pending = PendingColorState()
    pending.set_hue(10)
    pending.set_hue(20)
    pending.set_saturation(30)
    pending.set_saturation(40)
    assert pending.consume() == (20, 40)


def test_zero_counts_as_set():
    pending = PendingColorState()
    pending.set_hue(0)
    pending.set_saturation(0)
    assert pending.is_complete()
    assert pending.consume() == (0, 0)


def test_consume_incomplete():
    pending = PendingColorState()
    pending.set_hue(10)
    with pytest.raises(RuntimeError, match="incomplete"):
        pending.consume()
    assert pending.hue == 10


def test_reset():
    pending = PendingColorState()
    pending.set_hue(10)
    pending.set_saturation(20)
    pending.reset()
    assert not pending.is_complete()
    assert pending.hue is None
    assert pending.saturation is None
    assert "hue=None" in repr(pending)
