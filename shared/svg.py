"""SVG transform factory, page constants, and path drawing helpers."""
from typing import Callable
from .types import Point, Line, Path
from .geometry import path_polyline

# US Letter landscape at 72 dpi (11" x 8.5")
W, H = 792, 612

BBox = tuple[float, float, float, float]  # xmin, ymin, xmax, ymax


def paths_bbox(paths: list[Path], pad: float = 0.0) -> BBox:
    """Bounding box of the polylines of *paths*, grown by *pad* on every side."""
    pts = [p for path in paths for p in path_polyline(path)]
    xs = [p[0] for p in pts]; ys = [p[1] for p in pts]
    return (min(xs)-pad, min(ys)-pad, max(xs)+pad, max(ys)+pad)


def make_svg_transform(bounds: BBox, frame: BBox) -> Callable[[float, float], tuple[float, float]]:
    """Create to_svg closure mapping model *bounds* into the SVG *frame*.

    Scale is uniform and the y axis is flipped; the drawing is centred in
    the frame along the axis with slack.
    """
    bx0, by0, bx1, by1 = bounds; fx0, fy0, fx1, fy1 = frame
    bw = max(bx1-bx0, 1e-9); bh = max(by1-by0, 1e-9)
    s = min((fx1-fx0)/bw, (fy1-fy0)/bh)
    px = fx0 + ((fx1-fx0) - bw*s)/2 - bx0*s
    py = fy1 - ((fy1-fy0) - bh*s)/2 + by0*s
    def to_svg(x: float, y: float) -> tuple[float, float]:
        return (px + x*s, py - y*s)
    return to_svg


def path_svg(path: Path, to_svg, stroke: str, width: float, dash: str | None = None) -> str:
    """One <line> or <polyline> element for a Line or Arc."""
    dash_attr = f' stroke-dasharray="{dash}"' if dash else ""
    if isinstance(path, Line):
        sx1, sy1 = to_svg(*path.origin); sx2, sy2 = to_svg(*path.end)
        return (f'<line x1="{sx1:.1f}" y1="{sy1:.1f}" x2="{sx2:.1f}" y2="{sy2:.1f}"'
                f' stroke="{stroke}" stroke-width="{width}"{dash_attr}/>')
    pts = " ".join(f"{to_svg(x, y)[0]:.1f},{to_svg(x, y)[1]:.1f}" for x, y in path_polyline(path))
    return (f'<polyline points="{pts}" fill="none" stroke="{stroke}"'
            f' stroke-width="{width}" stroke-linecap="round"{dash_attr}/>')


def point_svg(p: Point, to_svg, color: str, r: float = 2.0) -> str:
    sx, sy = to_svg(*p)
    return f'<circle cx="{sx:.1f}" cy="{sy:.1f}" r="{r}" fill="{color}"/>'
