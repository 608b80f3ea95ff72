"""Tests for the geometry service."""
import pytest

from dreamhouse.core import vertices
from dreamhouse.services.geometry_service import GeometryService

service = GeometryService()


def test_create_box_keeps_position_out_of_vertices():
    geom = service.create_box(10, 9, 20, 3.0, 4.5, -2.0, "brick", "red")

    assert geom.vertices == vertices.box(10, 9, 20)
    assert len(geom.indices) == 36
    assert (geom.position.x, geom.position.y, geom.position.z) == (3.0, 4.5, -2.0)
    assert geom.material_type == "brick"
    assert geom.color == "red"


def test_world_vertices_apply_position():
    geom = service.create_box(2, 2, 2, 10.0, 1.0, 0.0)
    world = geom.world_vertices()

    assert min(v[1] for v in world) == pytest.approx(0.0)
    assert min(v[0] for v in world) == pytest.approx(9.0)


def test_gabled_roof_height_formula():
    # ((40 + 3) / 2) * (8 / 12)
    assert service.roof_height(40, 8, 1.5) == pytest.approx(14.333333, abs=1e-6)


def test_gabled_roof_height_zero_at_zero_pitch():
    assert service.roof_height(40, 0, 1.5) == 0.0


def test_gabled_roof_height_increases_with_pitch():
    heights = [service.roof_height(36, pitch, 1.5) for pitch in range(0, 13)]
    assert heights == sorted(heights)
    assert len(set(heights)) == len(heights)


def test_gabled_roof_height_ignores_depth():
    square = service.create_gabled_roof(40, 40, 6, 1.0)
    deep = service.create_gabled_roof(40, 90, 6, 1.0)
    assert square.vertices[1] == deep.vertices[1]


def test_create_gabled_roof_geometry():
    geom = service.create_gabled_roof(40, 30, 8, 1.5)

    assert geom.vertex_count == 6
    assert geom.triangle_count == 8
    assert geom.material_type == "roof"
    assert geom.vertices[1] == pytest.approx(43 / 2 * 8 / 12)


def test_create_gabled_roof_rejects_zero_pitch():
    with pytest.raises(ValueError):
        service.create_gabled_roof(40, 30, 0, 1.5)


def test_create_flat_roof_defaults_thickness():
    geom = service.create_flat_roof(20, 10, 0.0)
    ys = geom.vertices[1::3]
    assert max(ys) - min(ys) == pytest.approx(0.75)
    assert geom.color == "#333333"


def test_parapet_walls_ring_the_expanded_footprint():
    walls = service.create_parapet_walls(20, 10, 1.0)

    assert len(walls) == 4
    front, back, right, left = walls
    assert front.position.z == pytest.approx(6.0)
    assert back.position.z == pytest.approx(-6.0)
    assert right.position.x == pytest.approx(11.0)
    assert left.position.x == pytest.approx(-11.0)
    for wall in walls:
        assert wall.position.y == pytest.approx(1.25)
        assert wall.material_type == "concrete"
        assert wall.vertex_count == 8
        assert len(wall.indices) == 36

    # Front/back span the roof width plus one thickness, sides the roof depth
    assert max(front.vertices[0::3]) == pytest.approx((22 + 0.5) / 2)
    assert max(right.vertices[2::3]) == pytest.approx(12 / 2)


def test_create_quad():
    geom = service.create_quad(3, 5, 1, 2, 3)
    assert geom.vertex_count == 4
    assert geom.indices == [0, 1, 2, 0, 2, 3]
    assert geom.material_type == "glass"


def test_geometry_units_do_not_share_index_lists():
    a = service.create_box(1, 1, 1, 0, 0, 0)
    b = service.create_box(1, 1, 1, 0, 0, 0)
    a.indices.append(99)
    assert len(b.indices) == 36
