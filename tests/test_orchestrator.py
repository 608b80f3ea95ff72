"""End-to-end tests for the design orchestrator."""
import pytest
from pydantic import ValidationError

from dreamhouse.core.orchestrator import DesignOrchestrator
from dreamhouse.core.registry import StrategyRegistry
from dreamhouse.models import HouseParameters, LayoutData, derive_footprint
from dreamhouse.services.geometry_service import GeometryService
from dreamhouse.strategies.base import LayoutStrategy
from dreamhouse.strategies.roof.flat import FlatRoofStrategy

orchestrator = DesignOrchestrator()


def make_params(**overrides) -> HouseParameters:
    values = dict(
        lot_size=2500,
        roof_type="flat",
        ceiling_height=9.0,
        stories=1,
        building_shape="cube",
        roof_pitch=0.0,
    )
    values.update(overrides)
    return HouseParameters(**values)


def test_single_story_cube_flat_roof():
    params = make_params()
    building = orchestrator.generate(params)

    assert len(building.sections) == 1
    assert len(building.roofs) == 1
    assert building.total_height == pytest.approx(params.ceiling_height)
    assert building.max_dimension == max(params.footprint_width, params.footprint_depth)
    assert building.windows == []
    assert building.interior_walls == []


def test_two_story_l_shape():
    params = make_params(lot_size=3600, stories=2, building_shape="l-shape")
    layout = orchestrator.calculate_layout(params)
    building = orchestrator.generate(params)

    assert len(layout.sections) == 2
    assert len(layout.roof_sections) == 2
    assert len(building.sections) == 2
    assert len(building.roofs) == 2


def test_gabled_roof_adds_ridge_height():
    params = make_params(
        roof_type="gabled", roof_pitch=8, has_eaves=True, eaves_overhang=1.5,
        footprint_width=40, footprint_depth=60,
    )
    building = orchestrator.generate(params)

    assert building.roofs[0].height == pytest.approx(14.333333, abs=1e-6)
    assert building.total_height == pytest.approx(9 + 14.333333, abs=1e-6)


def test_eaves_without_explicit_overhang_default_to_1_5():
    params = make_params(
        roof_type="gabled", roof_pitch=12, has_eaves=True, eaves_overhang=0,
        footprint_width=40, footprint_depth=60,
    )
    assert params.effective_overhang == 1.5
    assert orchestrator.generate(params).roofs[0].height == pytest.approx(21.5)


def test_no_eaves_means_no_overhang():
    params = make_params(
        roof_type="gabled", roof_pitch=12, has_eaves=False, eaves_overhang=2.0,
        footprint_width=40, footprint_depth=60,
    )
    assert orchestrator.generate(params).roofs[0].height == pytest.approx(20)


def test_gabled_without_pitch_builds_flat_roof():
    building = orchestrator.generate(make_params(roof_type="gabled", roof_pitch=0))
    assert building.roofs[0].roof_type == "flat"


def test_sections_use_exterior_material_and_color():
    params = make_params(exterior_material="brick", material={"color": "red"})
    section = orchestrator.generate(params).sections[0]
    assert section.material_type == "brick"
    assert section.color == "red"


def test_parapets_are_collected():
    params = make_params(building_shape="l-shape", has_parapet=True)
    building = orchestrator.generate(params)

    assert len(building.parapets) == 8
    assert all(len(r.parapets) == 4 for r in building.roofs)


def test_foundation_slab_below_grade():
    params = make_params(foundation_type="basement")
    foundation = orchestrator.generate(params).foundation

    assert foundation is not None
    assert max(v[1] for v in foundation.world_vertices()) == pytest.approx(0.0)
    assert min(v[1] for v in foundation.world_vertices()) == pytest.approx(-8.0)


def test_unknown_foundation_type_has_no_foundation():
    assert orchestrator.generate(make_params(foundation_type="stilts")).foundation is None


def test_unknown_shape_falls_back_to_cube():
    building = orchestrator.generate(make_params(building_shape="dodecahedron"))
    assert len(building.sections) == 1


def test_split_level_total_height():
    params = make_params(building_shape="split-level", stories=3, ceiling_height=10)
    assert orchestrator.generate(params).total_height == pytest.approx(12)


@pytest.mark.parametrize("shape", ["cube", "two-story", "l-shape", "split-level", "angled"])
def test_same_parameters_give_identical_geometry(shape):
    params = make_params(
        lot_size=4200, stories=2, building_shape=shape, roof_type="gabled",
        roof_pitch=6, has_eaves=True,
    )
    first = orchestrator.generate(params)
    second = orchestrator.generate(params)
    assert first.model_dump() == second.model_dump()


def test_footprint_is_derived_from_lot_size():
    params = make_params(lot_size=3500)
    width, depth = derive_footprint(3500, 1)

    assert params.footprint_width == pytest.approx(width)
    assert params.footprint_depth == pytest.approx(depth)
    assert width * depth == pytest.approx(3500 / 1.5)
    assert depth / width == pytest.approx(1.5)


@pytest.mark.parametrize("overrides", [
    {"lot_size": 0},
    {"lot_size": -10},
    {"stories": 0},
    {"window_to_wall_ratio": 1.5},
    {"roof_pitch": -1},
])
def test_invalid_parameters_are_rejected(overrides):
    with pytest.raises(ValidationError):
        make_params(**overrides)


def test_parameters_are_frozen():
    params = make_params()
    with pytest.raises(ValidationError):
        params.stories = 3


def test_single_footprint_dimension_is_kept():
    params = make_params(footprint_width=40)

    assert params.footprint_width == 40
    assert params.footprint_depth == pytest.approx(2500 / 1.5 / 40)


def test_single_footprint_depth_is_kept():
    params = make_params(stories=2, footprint_depth=25)

    assert params.footprint_depth == 25
    assert params.footprint_width == pytest.approx(2500 / 1.5 / 2 / 25)


def test_footprint_derived_from_numeric_string_lot_size():
    params = make_params(lot_size="2500")
    width, depth = derive_footprint(2500, 1)

    assert params.lot_size == 2500
    assert params.footprint_width == pytest.approx(width)
    assert params.footprint_depth == pytest.approx(depth)


@pytest.mark.parametrize("lot_size", ["lots", None])
def test_unusable_lot_size_never_leaves_zero_footprint(lot_size):
    with pytest.raises(ValidationError):
        make_params(lot_size=lot_size)


@pytest.mark.parametrize("overrides", [
    {"footprint_width": -40},
    {"footprint_width": 40, "footprint_depth": -10},
])
def test_non_positive_footprint_is_rejected(overrides):
    with pytest.raises(ValidationError):
        make_params(**overrides)


def test_no_roof_sections_gives_no_roofs():
    assert orchestrator.calculate_roofs(LayoutData(roof_sections=[]), make_params()) == []


class EmptyLayoutStrategy(LayoutStrategy):
    def get_id(self) -> str:
        return "cube"

    def calculate_layout(self, width, depth, ceiling_height, stories) -> LayoutData:
        return LayoutData(
            total_width=width,
            total_depth=depth,
            total_height=ceiling_height * stories,
        )


def test_layout_without_sections_builds_empty_building():
    registry = StrategyRegistry()
    registry.register_layout(EmptyLayoutStrategy())
    registry.register_roof(FlatRoofStrategy(GeometryService()))
    params = make_params(has_parapet=True)

    building = DesignOrchestrator(registry).generate(params)

    assert building.sections == []
    assert building.roofs == []
    assert building.parapets == []
    assert building.total_height == pytest.approx(params.ceiling_height)
    assert building.max_dimension == max(params.footprint_width, params.footprint_depth)
