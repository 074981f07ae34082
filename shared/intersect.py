"""Intersection engine for lines, arcs, and circles.

Point ordering is deterministic:
  * line vs circle/arc: ascending position along the line, origin → end
  * circle/arc vs circle/arc: the point left of the first center → second
    center direction comes first
"""
import math
from .types import Point, Line, Arc, Circle
from .geometry import GeometryError, line_isect, seg_isect, is_between_arc_angles, point_angle_deg

_EPS = 1e-9

Round = Circle | Arc

# ============================================================
# Infinite Lines
# ============================================================
def slope_intersection(l1: Line, l2: Line) -> Point | None:
    """Intersection of the infinite extensions of two lines. None if parallel."""
    d1 = (l1.end[0]-l1.origin[0], l1.end[1]-l1.origin[1])
    d2 = (l2.end[0]-l2.origin[0], l2.end[1]-l2.origin[1])
    try:
        return line_isect(l1.origin, d1, l2.origin, d2)
    except GeometryError:
        return None

# ============================================================
# Primitive Solvers
# ============================================================
def line_circle_isects(line: Line, c: Point, r: float) -> list[Point]:
    """Points where segment *line* meets the circle (c, r), ordered origin → end."""
    dx = line.end[0]-line.origin[0]; dy = line.end[1]-line.origin[1]
    L = math.sqrt(dx**2+dy**2)
    if L == 0:
        return []
    ux, uy = dx/L, dy/L
    ax = line.origin[0]-c[0]; ay = line.origin[1]-c[1]
    b = ax*ux+ay*uy
    h_sq = b**2-(ax**2+ay**2-r**2)
    if h_sq < -_EPS:
        return []
    if h_sq <= _EPS:
        ts = [-b]  # tangent
    else:
        h = math.sqrt(h_sq); ts = [-b-h, -b+h]
    return [(line.origin[0]+t*ux, line.origin[1]+t*uy) for t in ts if -_EPS <= t <= L+_EPS]

def circle_circle_isects(c1: Point, r1: float, c2: Point, r2: float) -> list[Point]:
    """Intersections of two circles, the point left of c1 → c2 first.

    Concentric circles (coincident or not) have no intersection points.
    """
    dx = c2[0]-c1[0]; dy = c2[1]-c1[1]; d = math.sqrt(dx**2+dy**2)
    if d < _EPS:
        return []
    if d > r1 + r2 + _EPS or d < abs(r1-r2) - _EPS:
        return []
    a = (r1**2-r2**2+d**2)/(2*d)
    h = math.sqrt(max(0, r1**2-a**2))
    ux, uy = dx/d, dy/d; Mx, My = c1[0]+a*ux, c1[1]+a*uy
    if h < _EPS:
        return [(Mx, My)]
    I1 = (Mx+h*(-uy), My+h*ux); I2 = (Mx-h*(-uy), My-h*ux)
    return [I1, I2]

def _on_round(p: Point, shape: Round) -> bool:
    if isinstance(shape, Circle):
        return True
    return is_between_arc_angles(point_angle_deg(shape.center, p), shape, False)

# ============================================================
# Dispatch
# ============================================================
def intersect(a, b) -> list[Point]:
    """Intersection points of two Line/Arc/Circle operands; empty list when none."""
    if isinstance(a, Line) and isinstance(b, Line):
        p = seg_isect(a.origin, a.end, b.origin, b.end, _EPS)
        return [] if p is None else [p]
    if isinstance(a, Line) or isinstance(b, Line):
        line, shape = (a, b) if isinstance(a, Line) else (b, a)
        if not isinstance(shape, (Arc, Circle)):
            raise GeometryError(f"Cannot intersect {type(a).__name__} with {type(b).__name__}")
        return [p for p in line_circle_isects(line, shape.center, shape.radius) if _on_round(p, shape)]
    if not (isinstance(a, (Arc, Circle)) and isinstance(b, (Arc, Circle))):
        raise GeometryError(f"Cannot intersect {type(a).__name__} with {type(b).__name__}")
    pts = circle_circle_isects(a.center, a.radius, b.center, b.radius)
    return [p for p in pts if _on_round(p, a) and _on_round(p, b)]
