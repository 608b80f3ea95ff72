"""Room layout generator — fixed percentage floor plans per room-count bracket.

Rooms use building-local coordinates with the origin at a footprint corner
(0, 0) on every floor. They are NOT centered: renderers that center the
building must shift each room by (-width / 2, -depth / 2) themselves.
"""

from __future__ import annotations
import logging
import math

from dreamhouse import config
from dreamhouse.core.registry import normalize_name
from dreamhouse.models import LayoutShape, Room

logger = logging.getLogger(__name__)

GRID_COLUMNS = 3

# (name, floor, x, z, width, depth) as fractions of the footprint
RoomTemplate = tuple[str, int, float, float, float, float]

SMALL_PLAN: list[RoomTemplate] = [
    ("Living Room", 1, 0.0, 0.0, 1.0, 0.6),
    ("Bedroom", 1, 0.0, 0.6, 0.6, 0.4),
    ("Bathroom", 1, 0.6, 0.6, 0.4, 0.4),
]

MEDIUM_SINGLE_STORY_PLAN: list[RoomTemplate] = [
    ("Living Room", 1, 0.0, 0.0, 0.6, 0.5),
    ("Kitchen", 1, 0.6, 0.0, 0.4, 0.5),
    ("Bedroom 1", 1, 0.0, 0.5, 0.4, 0.5),
    ("Bedroom 2", 1, 0.4, 0.5, 0.35, 0.5),
    ("Bathroom", 1, 0.75, 0.5, 0.25, 0.5),
]

MEDIUM_TWO_STORY_PLAN: list[RoomTemplate] = [
    ("Living Room", 1, 0.0, 0.0, 1.0, 0.6),
    ("Kitchen", 1, 0.0, 0.6, 0.7, 0.4),
    ("Powder Room", 1, 0.7, 0.6, 0.3, 0.4),
    ("Master Bedroom", 2, 0.0, 0.0, 0.6, 0.6),
    ("Bedroom 2", 2, 0.6, 0.0, 0.4, 0.6),
    ("Bathroom", 2, 0.0, 0.6, 1.0, 0.4),
]

LARGE_TWO_STORY_PLAN: list[RoomTemplate] = [
    ("Living Room", 1, 0.0, 0.0, 0.5, 0.6),
    ("Dining Room", 1, 0.5, 0.0, 0.5, 0.6),
    ("Kitchen", 1, 0.0, 0.6, 0.7, 0.4),
    ("Powder Room", 1, 0.7, 0.6, 0.3, 0.4),
    ("Master Bedroom", 2, 0.0, 0.0, 0.5, 0.6),
    ("Bedroom 2", 2, 0.5, 0.0, 0.5, 0.6),
    ("Bedroom 3", 2, 0.0, 0.6, 0.4, 0.4),
    ("Master Bath", 2, 0.4, 0.6, 0.3, 0.4),
    ("Bathroom", 2, 0.7, 0.6, 0.3, 0.4),
]


def calculate_window_count(
    width: float, depth: float, window_to_wall_ratio: float,
) -> int:
    """
    Windows for a room from its wall area.

    ``ceil(perimeter * 9 ft * ratio / 12 sq ft per window)``, clamped to 1..5.
    """
    perimeter = 2 * (width + depth)
    wall_area = perimeter * config.WALL_HEIGHT_FOR_WINDOWS
    target = math.ceil(wall_area * window_to_wall_ratio / config.SQFT_PER_WINDOW)
    return max(config.MIN_WINDOWS_PER_ROOM, min(config.MAX_WINDOWS_PER_ROOM, target))


class RoomLayoutGenerator:
    """
    Deterministic 2D floor plans.

    The room-count bracket picks a fixed template, so the number of rooms
    returned is the template's size, not necessarily `room_count`.
    Only the single-story grid (6+ rooms) follows `room_count` exactly.
    """

    def __init__(self, window_to_wall_ratio: float = 0.15) -> None:
        self.window_to_wall_ratio = window_to_wall_ratio

    def generate(
        self,
        width: float,
        depth: float,
        room_count: int,
        stories: int = 1,
        shape: str | None = None,
    ) -> list[Room]:
        # A split-level always has an upper level
        if normalize_name(shape) == LayoutShape.SPLIT_LEVEL.value:
            stories = max(stories, 2)

        if room_count <= 3:
            plan = SMALL_PLAN
        elif room_count <= 5:
            plan = MEDIUM_TWO_STORY_PLAN if stories >= 2 else MEDIUM_SINGLE_STORY_PLAN
        elif stories >= 2:
            plan = LARGE_TWO_STORY_PLAN
        else:
            rooms = self._grid(width, depth, room_count)
            logger.debug("Grid plan: %d rooms on %.1fx%.1f", len(rooms), width, depth)
            return rooms

        rooms = [self._from_template(t, width, depth) for t in plan]
        logger.debug(
            "Template plan: %d rooms over %d floor(s) on %.1fx%.1f",
            len(rooms), max(r.floor for r in rooms), width, depth,
        )
        return rooms

    def _from_template(self, template: RoomTemplate, width: float, depth: float) -> Room:
        name, floor, fx, fz, fw, fd = template
        room_width = width * fw
        room_depth = depth * fd
        return Room(
            name=name,
            floor=floor,
            x=width * fx,
            z=depth * fz,
            width=room_width,
            depth=room_depth,
            windows=calculate_window_count(
                room_width, room_depth, self.window_to_wall_ratio,
            ),
        )

    def _grid(self, width: float, depth: float, room_count: int) -> list[Room]:
        rows = math.ceil(room_count / GRID_COLUMNS)
        cell_width = width / GRID_COLUMNS
        cell_depth = depth / rows

        rooms: list[Room] = []
        for i in range(room_count):
            if i == 0:
                name = "Living Room"
            elif i == 1:
                name = "Kitchen"
            elif i == room_count - 1:
                name = "Bathroom"
            else:
                name = f"Bedroom {i - 1}"

            rooms.append(Room(
                name=name,
                floor=1,
                x=(i % GRID_COLUMNS) * cell_width,
                z=(i // GRID_COLUMNS) * cell_depth,
                width=cell_width,
                depth=cell_depth,
                windows=0 if name == "Bathroom" else 1,
            ))
        return rooms
