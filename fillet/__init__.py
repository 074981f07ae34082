"""Tangent-arc fillets between two lines or arcs that share an endpoint."""

from .core import (
    FilletFailure, FilletError, FilletResult, FilletOutcome,
    EndpointRef, MatchedPair,
    match_endpoints, locate_shards, build_guide, build_guides,
    resolve_center, resolve_tangent, assemble_fillet_arc,
    compute_fillet, fillet,
)
