"""Representative coordinate sampling along compressed edges.

The bearing of a turn is computed from the intersection node towards a point
a short distance down the road. Using the far node of the edge directly
gives wrong bearings for long, curved roads, so the point is sampled at a
fixed arc-length along the true road shape instead.
"""

import logging
from collections.abc import Iterable

from guidance_toolkit.core.geometry import EARTH_RADIUS, haversine_distance, interpolate_linear
from guidance_toolkit.domain import CompressedGeometryStore, Coordinate, NodePositions
from guidance_toolkit.exceptions import MissingNodeError

logger = logging.getLogger(__name__)

DESIRED_SEGMENT_LENGTH = 10.0


def node_coordinate(node_positions: NodePositions, node_id: int) -> Coordinate:
    """Look up the position of a node.

    Raises:
        MissingNodeError: If the node has no recorded position
    """
    try:
        return node_positions[node_id]
    except (KeyError, IndexError) as e:
        raise MissingNodeError(node_id) from e


def _interpolation_factor(
    first_distance: float, second_distance: float, desired_length: float
) -> float:
    """Fraction of the segment [first, second] needed to reach the desired length."""
    segment_length = second_distance - first_distance
    if segment_length <= 0.0:
        return 1.0
    missing_distance = desired_length - first_distance
    return max(0.0, min(missing_distance / segment_length, 1.0))


def coordinate_along_range(
    current: Coordinate,
    shape: Iterable[Coordinate],
    final: Coordinate,
    desired_length: float = DESIRED_SEGMENT_LENGTH,
    earth_radius: float = EARTH_RADIUS,
) -> Coordinate:
    """Walk a polyline and return the point at the desired arc-length.

    The polyline runs from ``current`` through ``shape`` to ``final``. If it
    is shorter than ``desired_length``, ``final`` is returned; the result never
    lies beyond the polyline.

    Args:
        current: First point of the polyline
        shape: Interior points in walking order
        final: Last point of the polyline
        desired_length: Arc-length to sample at, in metres
        earth_radius: Sphere radius for the haversine distance

    Returns:
        Coordinate at ``desired_length`` along the polyline, or ``final``
    """
    distance_to_current = 0.0

    for next_coordinate in [*shape, final]:
        distance_to_next = distance_to_current + haversine_distance(
            current, next_coordinate, earth_radius
        )

        # reached the segment that contains the sample point
        if distance_to_next >= desired_length:
            factor = _interpolation_factor(distance_to_current, distance_to_next, desired_length)
            return interpolate_linear(factor, current, next_coordinate)

        current = next_coordinate
        distance_to_current = distance_to_next

    logger.debug(
        "Polyline shorter than desired length (%.2f < %.2f), using final coordinate",
        distance_to_current,
        desired_length,
    )
    return final


def representative_coordinate(
    from_node: int,
    to_node: int,
    edge_id: int,
    traverse_in_reverse: bool,
    compressed_geometries: CompressedGeometryStore,
    node_positions: NodePositions,
    desired_length: float = DESIRED_SEGMENT_LENGTH,
    earth_radius: float = EARTH_RADIUS,
) -> Coordinate:
    """Find the (potentially interpolated) coordinate a fixed distance into an edge.

    Uncompressed edges are a single straight segment, so their far node is
    returned directly. Compressed edges are walked from the base node through
    their interior shape; when ``traverse_in_reverse`` is set the walk starts
    at ``to_node`` and visits the interior nodes backwards.

    Args:
        from_node: Source node of the edge
        to_node: Target node of the edge
        edge_id: Edge whose shape is sampled
        traverse_in_reverse: Walk the edge from ``to_node`` towards ``from_node``
        compressed_geometries: Store holding the interior shape of compressed edges
        node_positions: Position of every node
        desired_length: Arc-length from the base node, in metres
        earth_radius: Sphere radius for the haversine distance

    Returns:
        The representative coordinate of the edge

    Raises:
        MissingNodeError: If a referenced node has no position

    Examples:
        >>> from guidance_toolkit.domain import CompressedEdgeContainer
        >>> nodes = [Coordinate(0.0, 0.0), Coordinate(0.1, 0.0)]
        >>> representative_coordinate(0, 1, 0, False, CompressedEdgeContainer(), nodes)
        Coordinate(lon=0.1, lat=0.0)
    """
    base_node, final_node = (to_node, from_node) if traverse_in_reverse else (from_node, to_node)
    final_coordinate = node_coordinate(node_positions, final_node)

    # uncompressed roads are simple, return the coordinate at the end
    if not compressed_geometries.has_entry(edge_id):
        return final_coordinate

    bucket = compressed_geometries.get_bucket(edge_id)
    interior = reversed(bucket) if traverse_in_reverse else iter(bucket)

    return coordinate_along_range(
        node_coordinate(node_positions, base_node),
        (node_coordinate(node_positions, node_id) for node_id in interior),
        final_coordinate,
        desired_length=desired_length,
        earth_radius=earth_radius,
    )
