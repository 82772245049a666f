import pytest

from pipelineplanner import config
from pipelineplanner.model.outcomes import VertexError
from pipelineplanner.model.vertices import VertexSet


def test_ids_are_sequential():
    vertices = VertexSet()
    ids = [vertices.insert(x, 0).vertex_id for x in (0, 100, 200)]
    assert ids == [0, 1, 2]
    assert vertices.size() == 3
    assert vertices.get(1).x == 100
    assert vertices.get(1).y == 0


def test_default_separation_comes_from_config():
    assert VertexSet().min_separation == config.MIN_SEPARATION == 30.0


def test_exactly_at_threshold_is_accepted():
    vertices = VertexSet()
    vertices.insert(0, 0)
    result = vertices.insert(30.0, 0)
    assert result.ok
    assert result.vertex_id == 1


def test_just_below_threshold_is_rejected():
    vertices = VertexSet()
    vertices.insert(0, 0)
    result = vertices.insert(29.999, 0)
    assert not result.ok
    assert result.error is VertexError.TOO_CLOSE
    assert result.vertex_id is None
    assert vertices.size() == 1


def test_rejection_checks_every_existing_site():
    vertices = VertexSet()
    vertices.insert(0, 0)
    vertices.insert(100, 0)
    vertices.insert(200, 0)
    assert vertices.insert(110, 10).error is VertexError.TOO_CLOSE
    assert vertices.insert(18, 24).ok  # distance 30 from (0, 0)


def test_rejected_insert_does_not_consume_an_id():
    vertices = VertexSet()
    vertices.insert(0, 0)
    vertices.insert(1, 1)
    assert vertices.insert(50, 50).vertex_id == 1


@pytest.mark.parametrize("uid", [-1, 2])
def test_get_out_of_range_raises(uid):
    vertices = VertexSet()
    vertices.insert(0, 0)
    vertices.insert(100, 0)
    with pytest.raises(IndexError):
        vertices.get(uid)


def test_nearest_picks_closest_within_radius():
    vertices = VertexSet()
    vertices.insert(0, 0)
    vertices.insert(100, 0)
    assert vertices.nearest(70, 0) == 1
    assert vertices.nearest(10, 5) == 0
    assert vertices.nearest(50, 0) is None  # 50 away from both, radius 40


def test_nearest_radius_is_strict_and_ties_keep_lowest_id():
    vertices = VertexSet()
    vertices.insert(0, 0)
    vertices.insert(80, 0)
    assert vertices.nearest(40, 0) is None
    assert vertices.nearest(40, 0, max_distance=40.5) == 0


def test_nearest_with_y_offset():
    vertices = VertexSet()
    vertices.insert(100, 100)
    assert vertices.nearest(100, 116, max_distance=1, y_offset=16) == 0
    assert vertices.nearest(100, 116, max_distance=1) is None


def test_nearest_on_empty_set():
    assert VertexSet().nearest(0, 0) is None


def test_clear_restarts_ids():
    vertices = VertexSet()
    vertices.insert(0, 0)
    vertices.insert(0, 100)
    vertices.clear()
    assert vertices.size() == 0
    assert vertices.insert(0, 0).vertex_id == 0
