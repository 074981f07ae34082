"""Shared types, geometry, intersection, and SVG utilities."""

from .types import Point, Line, Arc, Circle, Path, EndpointSelector
from .geometry import (
    GeometryError,
    dist, points_equal_rounded, closest, left_norm, off_pt, line_isect, seg_isect,
    arc_poly, point_from_arc_angle, arc_end_points, arc_mid_point,
    no_revolutions, point_angle_deg, line_angle_deg,
    arc_span_deg, arc_end_deg, is_between, is_between_arc_angles,
    path_length, is_arc_concave_toward,
    parallel_line, rotate_point, rotate_path, move_path, clone_path, break_at_point,
    endpoint_points, get_endpoint, set_endpoint, trimmed_length,
    path_polyline,
)
from .intersect import intersect, slope_intersection, line_circle_isects, circle_circle_isects
from .svg import make_svg_transform, paths_bbox, path_svg, point_svg, W, H
