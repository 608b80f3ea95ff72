"""Wavefront OBJ export of the legacy single-box house.

Only the legacy box (plus an optional pyramid roof) is exported, not the
full multi-section BuildingGeometry.
"""

from __future__ import annotations
from datetime import datetime

from dreamhouse.core.legacy import build_legacy_mesh, legacy_dimensions
from dreamhouse.models import HouseParameters

PEAK_RATIO = 0.3

TEXTURE_COORDS = ["0.0 0.0", "1.0 0.0", "1.0 1.0", "0.0 1.0"]

# 1-based: bottom, top, front, back, left, right
NORMALS = [
    "0.0 -1.0 0.0",
    "0.0 1.0 0.0",
    "0.0 0.0 1.0",
    "0.0 0.0 -1.0",
    "-1.0 0.0 0.0",
    "1.0 0.0 0.0",
]
TOP_NORMAL = 2


def _number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def export_to_obj(params: HouseParameters) -> str:
    """Render the legacy house as OBJ text with section comments."""
    mesh = build_legacy_mesh(params.lot_size)
    base, height = legacy_dimensions(params.lot_size)

    lines: list[str] = [
        "# Architectural Dream Machine - House Export",
        f"# Lot Size: {_number(params.lot_size)} sq ft",
        f"# Style: {params.roof_type} roof, {params.window_style} windows",
        f"# Material: {params.material.color} {params.material.texture}",
        f"# Rooms: {params.room_count}",
        "",
        "# Vertices",
    ]
    lines += [f"v {v.x:.3f} {v.y:.3f} {v.z:.3f}" for v in mesh.vertices]
    lines.append("")

    lines.append("# Texture coordinates")
    lines += [f"vt {uv}" for uv in TEXTURE_COORDS]
    lines.append("")

    lines.append("# Normals")
    lines += [f"vn {n}" for n in NORMALS]
    lines.append("")

    lines.append("# Faces")
    lines.append("# House body")
    for i in range(0, len(mesh.indices), 3):
        # One normal per box side, two triangles (6 indices) each
        normal = min(i // 6 + 1, len(NORMALS))
        a, b, c = (idx + 1 for idx in mesh.indices[i:i + 3])
        lines.append(f"f {a}//{normal} {b}//{normal} {c}//{normal}")
    lines.append("")

    lines.append("# Roof")
    lines.append(f"# Roof type: {params.roof_type}")
    if params.roof_type.strip().lower() == "gabled":
        peak = height + base * PEAK_RATIO
        h = base / 2
        lines.append(f"v 0.0 {peak:.3f} 0.0")
        for x, z in [(-h, -h), (h, -h), (h, h), (-h, h)]:
            lines.append(f"v {x:.3f} {height:.3f} {z:.3f}")

        start = len(mesh.vertices) + 1
        n = TOP_NORMAL
        lines.append(f"f {start}//{n} {start + 1}//{n} {start + 2}//{n}")
        lines.append(f"f {start}//{n} {start + 3}//{n} {start + 4}//{n}")
    else:
        lines.append("# Flat roof is part of the main box geometry")
    lines.append("")

    lines.append("# Dimensions")
    lines.append(f"# Base: {base:.2f} x {base:.2f} ft")
    lines.append(f"# Height: {height:.2f} ft")
    lines.append(f"# Total volume: {base * base * height:.2f} cubic ft")

    return "\n".join(lines) + "\n"


def export_filename(
    design_id: int | str | None = None,
    style_name: str | None = None,
    now: datetime | None = None,
) -> str:
    """Download name: by style when known, otherwise timestamped."""
    label = design_id if design_id is not None else "export"
    if style_name:
        return f"house_design_{label}_{style_name.lower()}.obj"
    stamp = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    return f"house_design_{label}_{stamp}.obj"
