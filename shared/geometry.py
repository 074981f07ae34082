"""Pure geometry functions, angle math, measurement, and in-place path operations."""
import math
from dataclasses import replace
from .types import Point, Line, Arc, Path, EndpointSelector

# ============================================================
# Error Type
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible geometry operations."""

# ============================================================
# Point Utilities
# ============================================================
def dist(p: Point, q: Point) -> float:
    return math.hypot(q[0]-p[0], q[1]-p[1])

def points_equal_rounded(p: Point, q: Point, digits: int = 7) -> bool:
    """True when both coordinates agree after rounding to *digits* decimals."""
    return round(p[0], digits) == round(q[0], digits) and round(p[1], digits) == round(q[1], digits)

def closest(ref: Point, candidates: list[Point]) -> Point:
    """Candidate nearest to *ref*; the earliest one wins a tie."""
    if not candidates:
        raise GeometryError("No candidate points")
    best = candidates[0]; best_d = dist(ref, best)
    for c in candidates[1:]:
        d = dist(ref, c)
        if d < best_d:
            best, best_d = c, d
    return best

def left_norm(p1: Point, p2: Point) -> Point:
    """Unit normal vector to the left of the direction p1 → p2 (CCW perpendicular)."""
    dx = p2[0]-p1[0]; dy = p2[1]-p1[1]; Ln = math.sqrt(dx**2+dy**2)
    if Ln == 0:
        raise GeometryError(f"Zero-length direction at {p1}")
    return (-dy/Ln, dx/Ln)

def off_pt(p: Point, n: Point, d: float) -> Point:
    """Offset point p by distance d along unit direction n."""
    return (p[0]+d*n[0], p[1]+d*n[1])

def line_isect(p1: Point, d1: Point, p2: Point, d2: Point) -> Point:
    """Intersection of two lines (p1+t*d1) and (p2+s*d2). Raises GeometryError if parallel."""
    det = d1[0]*d2[1]-d1[1]*d2[0]
    if abs(det) < 1e-12:
        raise GeometryError(f"Parallel lines: det={det:.2e}")
    t = ((p2[0]-p1[0])*d2[1]-(p2[1]-p1[1])*d2[0])/det
    return (p1[0]+t*d1[0], p1[1]+t*d1[1])

def seg_isect(p1: Point, p2: Point, q1: Point, q2: Point, eps: float = 1e-9) -> Point | None:
    """Intersection of segments p1-p2 and q1-q2, endpoints included. None if parallel or apart."""
    d1 = (p2[0]-p1[0], p2[1]-p1[1]); d2 = (q2[0]-q1[0], q2[1]-q1[1])
    det = d1[0]*d2[1]-d1[1]*d2[0]
    if abs(det) < 1e-12:
        return None
    ex = q1[0]-p1[0]; ey = q1[1]-p1[1]
    t = (ex*d2[1]-ey*d2[0])/det
    s = (ex*d1[1]-ey*d1[0])/det
    if -eps <= t <= 1+eps and -eps <= s <= 1+eps:
        return (p1[0]+t*d1[0], p1[1]+t*d1[1])
    return None

def arc_poly(cx: float, cy: float, r: float, sa: float, ea: float, n: int = 60) -> list[Point]:
    """Generate n+1 points along a circular arc from angle sa to ea (radians)."""
    return [(cx+r*math.cos(sa+(ea-sa)*i/n), cy+r*math.sin(sa+(ea-sa)*i/n))
            for i in range(n+1)]

def point_from_arc_angle(arc: Arc, deg: float) -> Point:
    a = math.radians(deg)
    return (arc.center[0]+arc.radius*math.cos(a), arc.center[1]+arc.radius*math.sin(a))

def arc_end_points(arc: Arc) -> tuple[Point, Point]:
    return point_from_arc_angle(arc, arc.start_angle), point_from_arc_angle(arc, arc.end_angle)

def arc_mid_point(arc: Arc) -> Point:
    return point_from_arc_angle(arc, arc.start_angle + arc_span_deg(arc)/2)

# ============================================================
# Angle Utilities
# ============================================================
def no_revolutions(deg: float) -> float:
    """Normalize an angle in degrees into [0, 360)."""
    a = deg % 360
    return 0.0 if a >= 360 else a  # tiny negatives round up to 360.0

def point_angle_deg(p_from: Point, p_to: Point) -> float:
    """Angle of the vector p_from → p_to in degrees, in (-180, 180]."""
    return math.degrees(math.atan2(p_to[1]-p_from[1], p_to[0]-p_from[0]))

def line_angle_deg(line: Line) -> float:
    """Direction of a line in degrees, in [0, 360)."""
    return no_revolutions(point_angle_deg(line.origin, line.end))

# ============================================================
# Measurement
# ============================================================
def arc_span_deg(arc: Arc) -> float:
    """CCW sweep of an arc in degrees, in [0, 360). Zero for a degenerate arc."""
    return no_revolutions(arc.end_angle - arc.start_angle)

def arc_end_deg(arc: Arc) -> float:
    """End angle expressed in the same revolution as the start angle."""
    return arc.start_angle + arc_span_deg(arc)

def is_between(value: float, lim1: float, lim2: float, exclusive: bool, eps: float = 1e-9) -> bool:
    lo, hi = min(lim1, lim2), max(lim1, lim2)
    if exclusive:
        return lo < value < hi
    return lo - eps <= value <= hi + eps

def is_between_arc_angles(deg: float, arc: Arc, exclusive: bool) -> bool:
    """True when *deg* falls within the arc's CCW extent."""
    start = no_revolutions(arc.start_angle)
    end = start + arc_span_deg(arc)
    deg = no_revolutions(deg)
    # arc may straddle 0°, so check one revolution either side
    return any(is_between(deg, start+k, end+k, exclusive) for k in (0, 360, -360))

def path_length(path: Path) -> float:
    """Length of a line or arc; zero for degenerate paths."""
    if isinstance(path, Line):
        return dist(path.origin, path.end)
    return arc_span_deg(path) / 360 * 2*math.pi*path.radius

def is_arc_concave_toward(arc: Arc, point: Point) -> bool:
    """True when *point* lies on the inward-curving side of *arc*.

    Points within the arc's radius of its center always count; otherwise the
    segment from the arc's midpoint to the point must cross the chord.
    """
    if dist(arc.center, point) <= arc.radius:
        return True
    p_start, p_end = arc_end_points(arc)
    return seg_isect(arc_mid_point(arc), point, p_start, p_end) is not None

# ============================================================
# Path Factories and Mutators
# ============================================================
def parallel_line(line: Line, distance: float, near: Point) -> Line:
    """Line parallel to *line* at *distance*, on the side facing *near*.

    A *near* point collinear with the line resolves to the left side.
    """
    n = left_norm(line.origin, line.end)
    dx = line.end[0]-line.origin[0]; dy = line.end[1]-line.origin[1]
    side = dx*(near[1]-line.origin[1]) - dy*(near[0]-line.origin[0])
    if side < 0:
        n = (-n[0], -n[1])
    return Line(off_pt(line.origin, n, distance), off_pt(line.end, n, distance))

def rotate_point(p: Point, deg: float, pivot: Point) -> Point:
    a = math.radians(deg); c = math.cos(a); s = math.sin(a)
    dx = p[0]-pivot[0]; dy = p[1]-pivot[1]
    return (pivot[0]+dx*c-dy*s, pivot[1]+dx*s+dy*c)

def rotate_path(path: Path, deg: float, pivot: Point) -> Path:
    """Rotate a path in place about *pivot*. Returns the same object."""
    if isinstance(path, Line):
        path.origin = rotate_point(path.origin, deg, pivot)
        path.end = rotate_point(path.end, deg, pivot)
    else:
        path.center = rotate_point(path.center, deg, pivot)
        path.start_angle += deg; path.end_angle += deg
    return path

def move_path(path: Path, delta: Point) -> Path:
    """Translate a path in place by *delta*. Returns the same object."""
    if isinstance(path, Line):
        path.origin = (path.origin[0]+delta[0], path.origin[1]+delta[1])
        path.end = (path.end[0]+delta[0], path.end[1]+delta[1])
    else:
        path.center = (path.center[0]+delta[0], path.center[1]+delta[1])
    return path

def clone_path(path: Path) -> Path:
    return replace(path)

def break_at_point(path: Path, point: Point) -> Path | None:
    """Split *path* at *point*.

    Truncates *path* in place to end at *point* and returns the remainder.
    Returns None (and leaves *path* alone) when the point is not strictly
    inside the path's extent.
    """
    if isinstance(path, Line):
        if not (is_between(point[0], path.origin[0], path.end[0], False)
                and is_between(point[1], path.origin[1], path.end[1], False)):
            return None
        if points_equal_rounded(point, path.origin) or points_equal_rounded(point, path.end):
            return None
        dx = path.end[0]-path.origin[0]; dy = path.end[1]-path.origin[1]
        cross = dx*(point[1]-path.origin[1]) - dy*(point[0]-path.origin[0])
        if abs(cross) > 1e-9 * max(1.0, path_length(path)):
            return None
        rest = Line(point, path.end)
        path.end = point
        return rest
    deg = point_angle_deg(path.center, point)
    if not is_between_arc_angles(deg, path, True):
        return None
    # keep the break angle in the same revolution as the arc's own angles
    deg = path.start_angle + no_revolutions(deg - path.start_angle)
    rest = Arc(path.center, path.radius, deg, arc_end_deg(path))
    path.end_angle = deg
    return rest

# ============================================================
# Endpoint Access
# ============================================================
def endpoint_points(path: Path) -> tuple[Point, Point]:
    """Coordinates of a path's (start, end) named endpoints."""
    if isinstance(path, Line):
        return path.origin, path.end
    return arc_end_points(path)

def get_endpoint(path: Path, sel: EndpointSelector) -> Point | float:
    """Value of the selected endpoint field: a Point for lines, an angle for arcs."""
    if isinstance(path, Line):
        return path.origin if sel is EndpointSelector.START else path.end
    return path.start_angle if sel is EndpointSelector.START else path.end_angle

def set_endpoint(path: Path, sel: EndpointSelector, value: Point | float) -> None:
    """Overwrite exactly one named endpoint field of *path*."""
    if isinstance(path, Line):
        if sel is EndpointSelector.START: path.origin = value
        else: path.end = value
    else:
        if sel is EndpointSelector.START: path.start_angle = value
        else: path.end_angle = value

def trimmed_length(path: Path, sel: EndpointSelector, value: Point | float) -> float:
    """Length *path* would have after set_endpoint(path, sel, value). Does not mutate."""
    clone = clone_path(path)
    set_endpoint(clone, sel, value)
    return path_length(clone)

# ============================================================
# Polylines
# ============================================================
def path_polyline(path: Path, n: int = 60) -> list[Point]:
    """Convert a Line or Arc to a polyline of coordinate points."""
    if isinstance(path, Line):
        return [path.origin, path.end]
    sa = math.radians(path.start_angle)
    ea = sa + math.radians(arc_span_deg(path))
    return arc_poly(path.center[0], path.center[1], path.radius, sa, ea, n)
