"""Render a preview sheet of sample fillets.

Each panel shows a sample corner before filleting (dashed grey), the trimmed
paths, the fillet arc in red and its center. The last panel sweeps the
fillet radius over the line-line corner and marks where filleting stops
being possible.

Outputs fillet_preview.svg next to this script, or to the path given as the
first argument.
"""
import os, sys, math, datetime
from typing import NamedTuple

import numpy as np

from shared.types import Line, Arc, Path
from shared.geometry import clone_path, arc_span_deg
from shared.svg import W, H, make_svg_transform, paths_bbox, path_svg, point_svg
from fillet.core import compute_fillet, FilletResult

# ============================================================
# Cases
# ============================================================
class FilletCase(NamedTuple):
    name: str; path1: Path; path2: Path; radius: float

class SweepPoint(NamedTuple):
    radius: float; result: FilletResult
    path1: Path; path2: Path   # trimmed copies (untouched on failure)


def sample_cases() -> list[FilletCase]:
    """One corner per path combination, plus a collinear pair that cannot be filleted."""
    return [
        FilletCase("line / line", Line((0, 0), (10, 0)), Line((10, 0), (10, 10)), 2.0),
        FilletCase("line / convex arc", Line((0, 0), (10, 0)), Arc((20, 0), 10, 90, 180), 2.0),
        FilletCase("line / concave arc", Line((0, 0), (10, 0)),
                   Arc((5, 5), math.sqrt(50), 315, 405), 1.0),
        FilletCase("arc / arc", Arc((0, 0), 10, 0, 90), Arc((10, 10), 10, 180, 270), 2.0),
        FilletCase("collinear", Line((0, 0), (10, 0)), Line((10, 0), (20, 0)), 1.0),
    ]


def run_case(case: FilletCase) -> tuple[FilletResult, Path, Path]:
    """Fillet copies of the case's paths; the case itself is never mutated."""
    p1 = clone_path(case.path1); p2 = clone_path(case.path2)
    return compute_fillet(p1, p2, case.radius), p1, p2


def sweep_radii(path1: Path, path2: Path, r_min: float, r_max: float, n: int = 12) -> list[SweepPoint]:
    """Fillet fresh copies of the two paths at n radii evenly spaced in [r_min, r_max]."""
    sweep = []
    for r in np.linspace(r_min, r_max, n):
        p1 = clone_path(path1); p2 = clone_path(path2)
        sweep.append(SweepPoint(float(r), compute_fillet(p1, p2, float(r)), p1, p2))
    return sweep

# ============================================================
# Rendering
# ============================================================
def _caption(lines: list, frame, text: str, color: str = "#333"):
    fx0, fy0, fx1, _ = frame
    lines.append(f'<text x="{(fx0+fx1)/2:.1f}" y="{fy0+14:.1f}" text-anchor="middle"'
                 f' font-family="Arial" font-size="10" fill="{color}">{text}</text>')


def _frame_rect(lines: list, frame):
    fx0, fy0, fx1, fy1 = frame
    lines.append(f'<rect x="{fx0:.1f}" y="{fy0:.1f}" width="{fx1-fx0:.1f}" height="{fy1-fy0:.1f}"'
                 f' fill="none" stroke="#ccc" stroke-width="0.8"/>')


def render_case(lines: list, case: FilletCase, frame) -> FilletResult:
    """Append one panel for *case* inside *frame* (xmin, ymin, xmax, ymax in SVG points)."""
    result, p1, p2 = run_case(case)
    fx0, fy0, fx1, fy1 = frame
    to_svg = make_svg_transform(paths_bbox([case.path1, case.path2], pad=1.0),
                                (fx0+10, fy0+22, fx1-10, fy1-10))
    _frame_rect(lines, frame)
    for path in (case.path1, case.path2):
        lines.append(path_svg(path, to_svg, "#bbb", 1.0, dash="4,3"))
    if result.ok:
        for path in (p1, p2):
            lines.append(path_svg(path, to_svg, "#333", 1.6))
        lines.append(path_svg(result.arc, to_svg, "#d32f2f", 2.0))
        lines.append(point_svg(result.arc.center, to_svg, "#d32f2f"))
        _caption(lines, frame, f"{case.name}: r={case.radius:g}, span {arc_span_deg(result.arc):.1f}°")
    else:
        _caption(lines, frame, f"{case.name}: r={case.radius:g}, {result.failure.value}", "#b71c1c")
    return result


def render_sweep(lines: list, path1: Path, path2: Path, sweep: list[SweepPoint], frame):
    """Append the radius-sweep panel: every successful fillet overlaid on one corner."""
    fx0, fy0, fx1, fy1 = frame
    to_svg = make_svg_transform(paths_bbox([path1, path2], pad=1.0),
                                (fx0+10, fy0+22, fx1-10, fy1-10))
    _frame_rect(lines, frame)
    for path in (path1, path2):
        lines.append(path_svg(path, to_svg, "#333", 1.2))
    ok = [s for s in sweep if s.result.ok]
    for i, s in enumerate(ok):
        shade = int(40 + 160 * i / max(1, len(ok)-1))
        lines.append(path_svg(s.result.arc, to_svg, f"rgb({shade},60,{255-shade})", 1.2))
    failed = [s for s in sweep if not s.result.ok]
    if failed:
        first = failed[0]
        text = f"sweep r={sweep[0].radius:g}..{sweep[-1].radius:g}: fails from r={first.radius:g} ({first.result.failure.value})"
    else:
        text = f"sweep r={sweep[0].radius:g}..{sweep[-1].radius:g}: all succeed"
    _caption(lines, frame, text)


def build_svg(cases: list[FilletCase], sweep_corner: tuple[Path, Path], sweep: list[SweepPoint]) -> tuple[str, list[FilletResult]]:
    """Full preview sheet: case panels on a 3-column grid, the sweep panel last."""
    lines = [f'<svg xmlns="http://www.w3.org/2000/svg" width="{W}" height="{H}" viewBox="0 0 {W} {H}">',
             f'<rect width="{W}" height="{H}" fill="white"/>',
             f'<text x="{W/2}" y="24" text-anchor="middle" font-family="Arial" font-size="14"'
             f' font-weight="bold" fill="#333">Fillet preview</text>']
    cols = 3; margin = 20; gap = 12; top = 36
    n_panels = len(cases) + 1
    rows = math.ceil(n_panels / cols)
    pw = (W - 2*margin - (cols-1)*gap) / cols
    ph = (H - top - margin - (rows-1)*gap) / rows

    def frame(i):
        c, r = i % cols, i // cols
        x0 = margin + c*(pw+gap); y0 = top + r*(ph+gap)
        return (x0, y0, x0+pw, y0+ph)

    results = [render_case(lines, case, frame(i)) for i, case in enumerate(cases)]
    render_sweep(lines, sweep_corner[0], sweep_corner[1], sweep, frame(len(cases)))

    _now = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    lines.append(f'<text x="{W/2}" y="{H-4}" text-anchor="middle" font-family="Arial" font-size="7.5"'
                 f' fill="#999">Generated {_now}</text>')
    lines.append('</svg>')
    return "\n".join(lines), results


def main(argv: list[str] | None = None):
    argv = sys.argv if argv is None else argv
    svg_path = argv[1] if len(argv) > 1 else os.path.join(
        os.path.dirname(os.path.abspath(__file__)), "fillet_preview.svg")

    cases = sample_cases()
    corner = (cases[0].path1, cases[0].path2)
    sweep = sweep_radii(corner[0], corner[1], 1.0, 12.0, 12)
    svg_content, results = build_svg(cases, corner, sweep)
    with open(svg_path, "w", encoding="utf-8") as f:
        f.write(svg_content)

    print(f"SVG written to {svg_path}")
    for case, result in zip(cases, results):
        if result.ok:
            cx, cy = result.arc.center
            print(f"  {case.name:<20} center=({cx:.4f}, {cy:.4f}) span={arc_span_deg(result.arc):.2f}°")
        else:
            print(f"  {case.name:<20} no fillet: {result.failure.value}")
    n_ok = sum(1 for s in sweep if s.result.ok)
    print(f"  radius sweep: {n_ok}/{len(sweep)} radii filleted")


if __name__ == "__main__":
    main()
