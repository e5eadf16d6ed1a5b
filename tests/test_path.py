import pytest

from spanda.path import BezierPath, MotionPath, MotionPathTween


def ease_in_quad(t):
    return t * t


# ── BezierPath ──────────────────────────────────────────────────────────────


def test_linear_bezier_endpoints():
    path = BezierPath.linear((0.0, 0.0), (100.0, 100.0))
    start = path.evaluate(0.0)
    end = path.evaluate(1.0)
    assert abs(start[0]) < 1e-6
    assert abs(start[1]) < 1e-6
    assert abs(end[0] - 100.0) < 1e-6
    assert abs(end[1] - 100.0) < 1e-6


def test_linear_bezier_midpoint():
    path = BezierPath.linear((0.0, 0.0), (100.0, 200.0))
    mid = path.evaluate(0.5)
    assert abs(mid[0] - 50.0) < 1e-4
    assert abs(mid[1] - 100.0) < 1e-4


def test_quadratic_bezier_endpoints():
    path = BezierPath.quadratic((0.0, 0.0), (50.0, 100.0), (100.0, 0.0))
    start = path.evaluate(0.0)
    end = path.evaluate(1.0)
    assert abs(start[0]) < 1e-6
    assert abs(end[0] - 100.0) < 1e-6
    assert abs(end[1]) < 1e-6


def test_quadratic_bezier_peaks_above():
    path = BezierPath.quadratic((0.0, 0.0), (50.0, 100.0), (100.0, 0.0))
    mid = path.evaluate(0.5)
    assert mid[1] > 40.0


def test_cubic_bezier_endpoints():
    path = BezierPath.cubic((0.0, 0.0), (33.0, 100.0), (66.0, 100.0), (100.0, 0.0))
    start = path.evaluate(0.0)
    end = path.evaluate(1.0)
    assert abs(start[0]) < 1e-6
    assert abs(end[0] - 100.0) < 1e-6


def test_cubic_bezier_s_curve():
    path = BezierPath.cubic((0.0, 0.0), (0.0, 100.0), (100.0, 100.0), (100.0, 0.0))
    mid = path.evaluate(0.5)
    assert mid[1] > 50.0


def test_bezier_clamps_t():
    path = BezierPath.linear(0.0, 100.0)
    assert abs(path.evaluate(-1.0) - 0.0) < 1e-6
    assert abs(path.evaluate(2.0) - 100.0) < 1e-6


def test_bezier_rejects_bad_point_count():
    with pytest.raises(ValueError):
        BezierPath((0.0,))


# ── MotionPath ──────────────────────────────────────────────────────────────


def test_motion_path_single_segment():
    path = MotionPath().line(0.0, 100.0)
    assert abs(path.evaluate(0.0) - 0.0) < 1e-6
    assert abs(path.evaluate(1.0) - 100.0) < 1e-6
    assert abs(path.evaluate(0.5) - 50.0) < 1e-4


def test_motion_path_two_segments_equal_weight():
    path = MotionPath().line(0.0, 100.0).line(100.0, 200.0)
    assert abs(path.evaluate(0.0) - 0.0) < 1e-6
    assert abs(path.evaluate(0.5) - 100.0) < 1e-4
    assert abs(path.evaluate(1.0) - 200.0) < 1e-4
    assert abs(path.evaluate(0.25) - 50.0) < 1e-4


def test_motion_path_weighted_segments():
    path = MotionPath().line(0.0, 300.0, 3.0).line(300.0, 400.0, 1.0)
    assert abs(path.evaluate(0.75) - 300.0) < 1e-3


def test_motion_path_with_bezier():
    path = MotionPath().cubic((0.0, 0.0), (0.0, 100.0), (100.0, 100.0), (100.0, 0.0))
    start = path.evaluate(0.0)
    end = path.evaluate(1.0)
    assert abs(start[0]) < 1e-6
    assert abs(end[0] - 100.0) < 1e-6


def test_motion_path_empty_raises():
    path = MotionPath()
    with pytest.raises(ValueError, match="empty path"):
        path.evaluate(0.5)


def test_motion_path_segment_count():
    path = (
        MotionPath()
        .line(0.0, 1.0)
        .quadratic(1.0, 2.0, 3.0)
        .segment(BezierPath.linear(3.0, 4.0))
    )
    assert path.segment_count() == 3


def test_motion_path_all_zero_weights_returns_start():
    path = MotionPath().line(5.0, 10.0, 0.0).line(10.0, 20.0, -1.0)
    assert path.evaluate(0.7) == pytest.approx(5.0)


# ── MotionPathTween ─────────────────────────────────────────────────────────


def test_motion_path_tween_basic():
    path = MotionPath().line((0.0, 0.0), (100.0, 100.0))
    tween = MotionPathTween(path, duration=1.0)
    assert not tween.is_complete()

    tween.update(0.5)
    val = tween.value()
    assert abs(val[0] - 50.0) < 1e-4
    assert abs(val[1] - 50.0) < 1e-4

    tween.update(0.5)
    assert tween.is_complete()
    final_val = tween.value()
    assert abs(final_val[0] - 100.0) < 1e-4


def test_motion_path_tween_with_easing():
    path = MotionPath().line(0.0, 100.0)
    tween = MotionPathTween(path, duration=1.0, easing=ease_in_quad)
    tween.update(0.5)
    assert abs(tween.value() - 25.0) < 1e-4


def test_motion_path_tween_reset():
    path = MotionPath().line(0.0, 100.0)
    tween = MotionPathTween(path, duration=1.0)
    tween.update(1.0)
    assert tween.is_complete()
    tween.reset()
    assert not tween.is_complete()
    assert abs(tween.value() - 0.0) < 1e-6


def test_motion_path_tween_update_return_values():
    tween = MotionPathTween(MotionPath().line(0.0, 1.0), duration=1.0)
    assert tween.update(0.4) is True
    assert tween.update(0.7) is False
    assert tween.update(0.1) is False
    assert tween.progress() == pytest.approx(1.0)


def test_motion_path_tween_zero_duration():
    tween = MotionPathTween(MotionPath().line(0.0, 100.0), duration=0.0)
    assert tween.progress() == pytest.approx(1.0)
    assert tween.value() == pytest.approx(100.0)
    assert tween.update(0.0) is False
    assert tween.is_complete()


def test_motion_path_tween_negative_dt_ignored():
    tween = MotionPathTween(MotionPath().line(0.0, 100.0), duration=1.0)
    tween.update(-1.0)
    assert tween.progress() == pytest.approx(0.0)
    assert not tween.is_complete()