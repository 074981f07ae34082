"""Fillet solver: round the corner where two paths meet with a tangent arc.

The solver runs five stages in order, each consuming the previous result:

  1. match_endpoints   -- which named endpoint of each path is shared
  2. locate_shards     -- a reference point on each path near the junction
  3. build_guides      -- offset loci at fillet-radius distance from each path
  4. resolve_center    -- where the two guides meet
  5. resolve_tangent / assemble_fillet_arc -- tangency, validation, final arc

Any stage raises FilletError; compute_fillet() turns that into a
FilletResult and the input paths are only written after every stage has
succeeded.
"""
import logging
from enum import Enum
from typing import NamedTuple

from shared.types import Point, Line, Arc, Circle, Path, EndpointSelector
from shared.geometry import (
    GeometryError,
    points_equal_rounded, closest,
    line_angle_deg, point_angle_deg, arc_span_deg,
    is_arc_concave_toward, parallel_line,
    rotate_path, move_path, clone_path, break_at_point,
    endpoint_points, get_endpoint, set_endpoint, trimmed_length,
)
from shared.intersect import intersect, slope_intersection
from fillet.constants import ROUND_DIGITS, MAX_SPAN_DEG

logger = logging.getLogger(__name__)

# ============================================================
# Result Types
# ============================================================
class FilletFailure(Enum):
    INVALID_INPUT = "InvalidInput"
    NO_COMMON_ENDPOINT = "NoCommonEndpoint"
    NO_SHARD_INTERSECTION = "NoShardIntersection"
    NO_GUIDE_INTERSECTION = "NoGuideIntersection"
    DEGENERATE_TRIM = "DegenerateTrim"
    AMBIGUOUS_SPAN = "AmbiguousSpan"


class FilletError(GeometryError):
    """A stage of the fillet solver could not proceed."""

    def __init__(self, kind: FilletFailure, message: str):
        super().__init__(message)
        self.kind = kind


class EndpointRef(NamedTuple):
    """One named endpoint of a path and its coordinate at match time."""
    path: Path
    selector: EndpointSelector
    point: Point

    @property
    def is_start(self) -> bool:
        return self.selector is EndpointSelector.START


class MatchedPair(NamedTuple):
    refs: tuple[EndpointRef, EndpointRef]
    shards: tuple[Point, Point] | None = None


class FilletOutcome(NamedTuple):
    """Tangency on one side: fillet angle plus the deferred endpoint write."""
    angle: float
    ref: EndpointRef
    value: Point | float  # Point for a line, angle in degrees for an arc

    def commit(self) -> None:
        logger.debug("Trim %s %s: %s -> %s", type(self.ref.path).__name__, self.ref.selector.name,
                     get_endpoint(self.ref.path, self.ref.selector), self.value)
        set_endpoint(self.ref.path, self.ref.selector, self.value)


class FilletResult(NamedTuple):
    arc: Arc | None
    failure: FilletFailure | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.arc is not None

# ============================================================
# Stage 1: Endpoint Matcher
# ============================================================
def match_endpoints(path1: Path, path2: Path, digits: int = ROUND_DIGITS) -> MatchedPair:
    """Find the endpoint shared by both paths.

    Pairs are tried as (start,start), (start,end), (end,start), (end,end);
    the first coincident pair wins.
    """
    pts1 = endpoint_points(path1); pts2 = endpoint_points(path2)
    for i1, i2 in ((0, 0), (0, 1), (1, 0), (1, 1)):
        if points_equal_rounded(pts1[i1], pts2[i2], digits):
            return MatchedPair((
                EndpointRef(path1, EndpointSelector(i1), pts1[i1]),
                EndpointRef(path2, EndpointSelector(i2), pts2[i2]),
            ))
    raise FilletError(FilletFailure.NO_COMMON_ENDPOINT,
                      f"No common endpoint: {pts1} vs {pts2}")

# ============================================================
# Stage 2: Shard Locator
# ============================================================
def locate_shards(pair: MatchedPair, radius: float) -> MatchedPair:
    """Attach a shard point to each side: where a probe circle of *radius*
    around the common point first meets that path."""
    probe = Circle(pair.refs[0].point, radius)
    shards = []
    for i, ref in enumerate(pair.refs):
        hits = intersect(probe, ref.path)
        if not hits:
            raise FilletError(FilletFailure.NO_SHARD_INTERSECTION,
                              f"Probe circle r={radius} misses path {i+1}")
        shards.append(hits[0])
    return pair._replace(shards=tuple(shards))

# ============================================================
# Stage 3: Guide Builder
# ============================================================
def _clone_and_break(path: Path, shard: Point) -> tuple[Path, Path | None]:
    head = clone_path(path)
    tail = break_at_point(head, shard)
    return head, tail


def build_guide(ref: EndpointRef, shard: Point, radius: float, near: Point) -> Path | None:
    """Locus at *radius* from ref.path on the side facing *near*. None if unusable."""
    path = ref.path
    if isinstance(path, Line):
        return parallel_line(path, radius, near)
    half = _clone_and_break(path, shard)[0 if ref.is_start else 1]
    if half is None:
        return None
    if is_arc_concave_toward(half, near):
        guide_r = path.radius - radius  # fillet nests inside the arc
    else:
        guide_r = path.radius + radius
    if guide_r <= 0:
        return None
    return Arc(path.center, guide_r, path.start_angle, path.end_angle)


def build_guides(pair: MatchedPair, radius: float) -> tuple[Path, Path]:
    guides = []
    for i in range(2):
        guide = build_guide(pair.refs[i], pair.shards[i], radius, pair.shards[1-i])
        if guide is None:
            raise FilletError(FilletFailure.NO_GUIDE_INTERSECTION,
                              f"No usable guide for path {i+1}")
        guides.append(guide)
    return guides[0], guides[1]

# ============================================================
# Stage 4: Center Resolver
# ============================================================
def resolve_center(guides: tuple[Path, Path], common: Point) -> Point:
    hits = intersect(guides[0], guides[1])
    if not hits:
        raise FilletError(FilletFailure.NO_GUIDE_INTERSECTION, "Guide paths do not meet")
    if len(hits) == 1:
        return hits[0]
    return closest(common, hits)

# ============================================================
# Stage 5: Tangent Resolver & Committer
# ============================================================
def resolve_tangent(ref: EndpointRef, center: Point, digits: int = ROUND_DIGITS) -> FilletOutcome:
    """Tangency of the fillet centred at *center* with ref.path.

    Raises DEGENERATE_TRIM when writing the tangency would leave the path
    with zero length.
    """
    path = ref.path
    if isinstance(path, Arc):
        tangent_deg = line_angle_deg(Line(path.center, center))
        # outside the arc the fillet meets it from the opposite direction
        angle = tangent_deg if is_arc_concave_toward(path, center) else tangent_deg + 180
        outcome = FilletOutcome(angle, ref, tangent_deg)
    else:
        # unit vertical, turned perpendicular to the path and moved through the center
        perp = Line((0, 0), (0, 1))
        rotate_path(perp, line_angle_deg(path), (0, 0))
        move_path(perp, center)
        foot = slope_intersection(path, perp)
        if foot is None:
            raise FilletError(FilletFailure.NO_GUIDE_INTERSECTION,
                              f"Perpendicular through {center} misses {path}")
        outcome = FilletOutcome(point_angle_deg(center, foot), ref, foot)
    if round(trimmed_length(path, ref.selector, outcome.value), digits) == 0:
        raise FilletError(FilletFailure.DEGENERATE_TRIM,
                          f"Fillet would reduce {path} to zero length")
    return outcome


def assemble_fillet_arc(center: Point, radius: float, start_deg: float, end_deg: float,
                        digits: int = ROUND_DIGITS) -> Arc:
    """Fillet arc between two tangency angles, always as the minor arc."""
    arc = Arc(center, radius, start_deg, end_deg)
    span = arc_span_deg(arc)
    if round(span, digits) == MAX_SPAN_DEG:
        raise FilletError(FilletFailure.AMBIGUOUS_SPAN, f"Fillet span is {MAX_SPAN_DEG}°")
    if span > MAX_SPAN_DEG:
        arc.start_angle, arc.end_angle = end_deg, start_deg
    return arc

# ============================================================
# Entry Points
# ============================================================
def _solve(path1, path2, radius: float) -> tuple[Arc, list[FilletOutcome]]:
    if not isinstance(path1, (Line, Arc)) or not isinstance(path2, (Line, Arc)):
        raise FilletError(FilletFailure.INVALID_INPUT,
                          f"Expected Line or Arc, got {type(path1).__name__}, {type(path2).__name__}")
    if radius is None or not (radius > 0):
        raise FilletError(FilletFailure.INVALID_INPUT, f"Fillet radius must be positive: {radius}")

    pair = match_endpoints(path1, path2)
    pair = locate_shards(pair, radius)
    guides = build_guides(pair, radius)
    center = resolve_center(guides, pair.refs[0].point)
    outcomes = [resolve_tangent(ref, center) for ref in pair.refs]
    arc = assemble_fillet_arc(center, radius, outcomes[0].angle, outcomes[1].angle)
    return arc, outcomes


def compute_fillet(path1: Path, path2: Path, radius: float) -> FilletResult:
    """Round the corner between *path1* and *path2* with an arc of *radius*.

    On success both paths are trimmed in place to end where the fillet
    begins and the result carries the fillet arc. On failure neither path
    is touched and the result carries the failure kind.
    """
    try:
        arc, outcomes = _solve(path1, path2, radius)
    except FilletError as e:
        logger.debug("No fillet (%s): %s", e.kind.value, e)
        return FilletResult(None, e.kind, str(e))
    for outcome in outcomes:
        outcome.commit()
    logger.debug("Fillet r=%g at (%.6f, %.6f), span %.4f°",
                 radius, arc.center[0], arc.center[1], arc_span_deg(arc))
    return FilletResult(arc)


def fillet(path1: Path, path2: Path, radius: float) -> Arc | None:
    """Fillet arc between two paths sharing an endpoint, or None.

    Trims *path1* and *path2* in place only when an arc is returned.
    """
    return compute_fillet(path1, path2, radius).arc
