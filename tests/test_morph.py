import pytest

from spanda.morph import MorphPath, resample


def _ease_in_quad(t):
    return t * t


def test_morph_at_t0_returns_from():
    morph = MorphPath([(0.0, 0.0), (10.0, 10.0)], [(100.0, 100.0), (200.0, 200.0)], duration=1.0)
    val = morph.value()
    assert val[0][0] == pytest.approx(0.0, abs=1e-6)
    assert val[1][1] == pytest.approx(10.0, abs=1e-6)


def test_morph_at_t1_returns_to():
    morph = MorphPath([(0.0, 0.0), (10.0, 10.0)], [(100.0, 100.0), (200.0, 200.0)], duration=1.0)
    morph.update(1.0)
    val = morph.value()
    assert val[0][0] == pytest.approx(100.0, abs=1e-6)
    assert val[1][1] == pytest.approx(200.0, abs=1e-6)


def test_morph_midpoint():
    morph = MorphPath([(0.0, 0.0)], [(100.0, 200.0)], duration=1.0)
    morph.update(0.5)
    val = morph.value()
    assert val[0][0] == pytest.approx(50.0, abs=1e-5)
    assert val[0][1] == pytest.approx(100.0, abs=1e-5)


def test_morph_auto_resample_mismatched_lengths():
    morph = MorphPath([(0.0, 0.0), (100.0, 0.0)], [(0.0, 0.0), (50.0, 50.0), (100.0, 0.0)])
    assert len(morph.value()) == 3
    assert len(morph.from_points) == 3


def test_morph_update_returns_false_when_done():
    morph = MorphPath([(0.0, 0.0)], [(10.0, 10.0)], duration=0.5)
    assert morph.update(0.3)
    assert not morph.update(0.3)
    assert morph.is_complete()


def test_morph_reset():
    morph = MorphPath([(0.0, 0.0)], [(10.0, 10.0)], duration=0.5)
    morph.update(1.0)
    assert morph.is_complete()
    morph.reset()
    assert not morph.is_complete()
    assert morph.value()[0][0] == pytest.approx(0.0, abs=1e-6)


def test_morph_easing_applied():
    morph = MorphPath([(0.0, 0.0)], [(100.0, 0.0)], duration=1.0, easing=_ease_in_quad)
    morph.update(0.5)
    assert morph.value()[0][0] == pytest.approx(25.0, abs=1e-6)
    assert morph.progress() == pytest.approx(0.5)


def test_morph_seek():
    morph = MorphPath([(0.0, 0.0)], [(10.0, 20.0)], duration=2.0)
    morph.seek(0.25)
    assert morph.progress() == pytest.approx(0.25)
    assert not morph.is_complete()
    morph.seek(1.5)
    assert morph.progress() == pytest.approx(1.0)
    assert morph.is_complete()


def test_morph_zero_duration_is_at_end():
    morph = MorphPath([(0.0, 0.0)], [(10.0, 20.0)], duration=0.0)
    assert morph.progress() == 1.0
    assert morph.value() == [(10.0, 20.0)]


def test_resample_preserves_endpoints():
    resampled = resample([(0.0, 0.0), (50.0, 50.0), (100.0, 0.0)], 5)
    assert len(resampled) == 5
    assert resampled[0][0] == pytest.approx(0.0, abs=1e-5)
    assert resampled[0][1] == pytest.approx(0.0, abs=1e-5)
    assert resampled[4][0] == pytest.approx(100.0, abs=1e-5)
    assert resampled[4][1] == pytest.approx(0.0, abs=1e-5)


def test_resample_single_point():
    resampled = resample([(42.0, 17.0)], 1)
    assert len(resampled) == 1
    assert resampled[0][0] == pytest.approx(42.0, abs=1e-6)


def test_resample_even_spacing_on_line():
    resampled = resample([(0.0, 0.0), (100.0, 0.0)], 5)
    assert [p[0] for p in resampled] == pytest.approx([0.0, 25.0, 50.0, 75.0, 100.0])


def test_resample_degenerate_polyline_repeats_first():
    assert resample([(3.0, 4.0), (3.0, 4.0)], 3) == [(3.0, 4.0)] * 3


def test_resample_target_one_keeps_first():
    assert resample([(1.0, 2.0), (5.0, 6.0)], 1) == [(1.0, 2.0)]


def test_resample_empty():
    assert resample([], 4) == []