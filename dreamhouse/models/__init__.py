from .geometry import (
    Point3D, Position, GeometryData, RoofGeometry, BuildingGeometry, LegacyMesh,
)
from .layout import LayoutSection, RoofSection, LayoutData
from .building import LayoutShape, RoofType, Material, Room
from .parameters import HouseParameters, StyleTemplate, derive_footprint

__all__ = [
    "Point3D", "Position", "GeometryData", "RoofGeometry", "BuildingGeometry",
    "LegacyMesh",
    "LayoutSection", "RoofSection", "LayoutData",
    "LayoutShape", "RoofType", "Material", "Room",
    "HouseParameters", "StyleTemplate", "derive_footprint",
]
