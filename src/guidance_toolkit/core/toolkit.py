"""Settings-bound entry point to the guidance heuristics.

The heuristics in this package are plain functions taking their tolerances
as arguments. GuidanceToolkit binds them to one GuidanceSettings instance and
its SuffixTable, and logs each decision, so a pipeline stage can carry a
single object around.
"""

import logging

import structlog

from guidance_toolkit.config import GuidanceSettings
from guidance_toolkit.core.lanes import trim_lane_string
from guidance_toolkit.core.mirror import mirror
from guidance_toolkit.core.names import obvious_change_rules
from guidance_toolkit.core.road_class import can_be_seen_as_fork
from guidance_toolkit.core.roundabout import RoundaboutRole
from guidance_toolkit.core.sampler import representative_coordinate
from guidance_toolkit.domain import (
    CompressedGeometryStore,
    ConnectedRoad,
    Coordinate,
    NodePositions,
    RoadClass,
    SuffixTable,
    TurnInstruction,
)


class GuidanceToolkit:
    """Guidance heuristics configured from GuidanceSettings.

    Holds only immutable configuration and a read-only suffix table, so one
    instance can be shared by worker threads.

    Example:
        toolkit = GuidanceToolkit(GuidanceSettings())
        if toolkit.requires_name_announced("Main Street (A1)", "Oak Avenue"):
            ...
    """

    def __init__(
        self,
        settings: GuidanceSettings | None = None,
        suffix_table: SuffixTable | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the toolkit.

        Args:
            settings: Heuristic settings (defaults if None)
            suffix_table: Suffix vocabulary (built from ``settings.names`` if None)
            logger: Structured logger (wraps the stdlib "guidance_toolkit" logger if None,
                so nothing is emitted until logging is configured)
        """
        self.settings = settings or GuidanceSettings()
        if suffix_table is None:
            suffix_table = SuffixTable.from_config(self.settings.names)
        self.suffix_table = suffix_table
        self.logger = logger or structlog.wrap_logger(
            logging.getLogger("guidance_toolkit"),
            wrapper_class=structlog.stdlib.BoundLogger,
        )

    def representative_coordinate(
        self,
        from_node: int,
        to_node: int,
        edge_id: int,
        traverse_in_reverse: bool,
        compressed_geometries: CompressedGeometryStore,
        node_positions: NodePositions,
    ) -> Coordinate:
        """Sample the configured distance into an edge."""
        coordinate = representative_coordinate(
            from_node,
            to_node,
            edge_id,
            traverse_in_reverse,
            compressed_geometries,
            node_positions,
            desired_length=self.settings.sampling.desired_segment_length,
            earth_radius=self.settings.sampling.earth_radius,
        )
        self.logger.debug(
            "Representative coordinate",
            edge=edge_id,
            reverse=traverse_in_reverse,
            lon=coordinate.lon,
            lat=coordinate.lat,
        )
        return coordinate

    def requires_name_announced(self, from_name: str, to_name: str) -> bool:
        """Decide whether a name change is announced, using the bound suffix table."""
        return not self.explain_name_change(from_name, to_name)

    def explain_name_change(self, from_name: str, to_name: str) -> list[str]:
        """Obvious-change rules matched by a transition (empty if it is announced)."""
        rules = obvious_change_rules(from_name, to_name, self.suffix_table)
        self.logger.debug(
            "Name change",
            from_name=from_name,
            to_name=to_name,
            announce=not rules,
            rules=rules,
        )
        return rules

    def can_be_seen_as_fork(self, first: RoadClass, second: RoadClass) -> bool:
        """Whether two road classes are close enough in rank to form a fork."""
        fork = can_be_seen_as_fork(first, second)
        self.logger.debug("Fork check", first=first.name, second=second.name, fork=fork)
        return fork

    def mirror(self, road: ConnectedRoad) -> ConnectedRoad:
        """Mirror a road using the configured angular tolerance."""
        return mirror(road, epsilon=self.settings.mirror.angle_epsilon)

    def classify_roundabout(self, instruction: TurnInstruction) -> RoundaboutRole:
        """Roundabout membership of an instruction."""
        return RoundaboutRole.of(instruction)

    def trim_lane_string(self, lane_string: str, count_left: int, count_right: int) -> str:
        """Trim placeholder lanes using the configured markers."""
        trimmed = trim_lane_string(
            lane_string,
            count_left,
            count_right,
            markers=self.settings.lanes.placeholder_markers,
        )
        if trimmed == lane_string and (count_left > 0 or count_right > 0):
            self.logger.info(
                "Lane string left untouched",
                lanes=lane_string,
                left=count_left,
                right=count_right,
            )
        return trimmed
