"""Tests for the settings-bound toolkit facade and its configuration."""

import logging
import math
from unittest.mock import MagicMock, patch

import pytest
import structlog
from pydantic import ValidationError

from guidance_toolkit.config import (
    GuidanceSettings,
    LaneConfig,
    LoggingConfig,
    MirrorConfig,
    NameConfig,
    SamplingConfig,
    get_default_settings,
)
from guidance_toolkit.core import GuidanceToolkit, NameComparison
from guidance_toolkit.core.geometry import EARTH_RADIUS
from guidance_toolkit.domain import (
    CompressedEdgeContainer,
    ConnectedRoad,
    Coordinate,
    DirectionModifier,
    RoadClass,
    SuffixTable,
    TurnInstruction,
    TurnType,
)


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()


class TestSettings:
    """Tests for configuration models."""

    def test_defaults(self):
        settings = get_default_settings()
        assert settings.sampling.desired_segment_length == 10.0
        assert settings.lanes.placeholder_markers == "|&"
        assert "North" in settings.names.suffixes
        assert settings.logging.log_file is None

    def test_segment_length_must_be_positive(self):
        with pytest.raises(ValidationError):
            SamplingConfig(desired_segment_length=0.0)

    def test_placeholder_markers_not_empty(self):
        with pytest.raises(ValidationError):
            LaneConfig(placeholder_markers="")

    def test_epsilon_bounds(self):
        with pytest.raises(ValidationError):
            MirrorConfig(angle_epsilon=-1.0)

    def test_log_levels(self):
        assert LoggingConfig(log_level="debug").log_level == "debug"
        with pytest.raises(ValidationError):
            LoggingConfig(log_level="LOUD")


class TestGuidanceToolkit:
    """Tests for GuidanceToolkit."""

    def test_suffix_table_from_settings(self, logger):
        settings = GuidanceSettings(names=NameConfig(suffixes=["Street", "Boulevard"]))
        toolkit = GuidanceToolkit(settings, logger=logger)
        assert toolkit.suffix_table.is_suffix("street")
        assert not toolkit.requires_name_announced("Main Street", "Main Boulevard")
        assert toolkit.requires_name_announced("Oak Avenue", "Main Avenue")

    def test_explicit_suffix_table_wins(self, logger):
        toolkit = GuidanceToolkit(suffix_table=SuffixTable(["lane"]), logger=logger)
        assert toolkit.suffix_table.is_suffix("lane")
        assert not toolkit.suffix_table.is_suffix("north")

    def test_decisions_are_logged(self, logger):
        toolkit = GuidanceToolkit(logger=logger)
        toolkit.requires_name_announced("", "Main Street")
        logger.debug.assert_called_with(
            "Name change", from_name="", to_name="Main Street", announce=True, rules=[]
        )

    def test_explain_name_change_compares_once(self, logger):
        """The decision and its rules come from a single comparison and log event."""
        toolkit = GuidanceToolkit(logger=logger)
        with patch.object(NameComparison, "between", wraps=NameComparison.between) as between:
            rules = toolkit.explain_name_change("Main Street (A1)", "Main Street")
        assert between.call_count == 1
        assert rules
        logger.debug.assert_called_once()

    def test_explain_name_change(self, logger):
        settings = GuidanceSettings(names=NameConfig(suffixes=["street", "boulevard"]))
        toolkit = GuidanceToolkit(settings, logger=logger)
        assert "suffix_change" in toolkit.explain_name_change("Main Street", "Main Boulevard")
        assert toolkit.explain_name_change("Oak Avenue", "Main Avenue") == []
        assert toolkit.explain_name_change("", "Main Street") == []

    def test_sampling_length_from_settings(self, logger):
        step = math.degrees(1.0 / EARTH_RADIUS)
        nodes = [Coordinate(i * step, 0.0) for i in range(0, 101, 50)]
        settings = GuidanceSettings(sampling=SamplingConfig(desired_segment_length=25.0))
        toolkit = GuidanceToolkit(settings, logger=logger)

        result = toolkit.representative_coordinate(
            0, 2, 0, False, CompressedEdgeContainer({0: [1]}), nodes
        )
        assert result.lon == pytest.approx(25.0 * step, abs=1e-9)
        assert result.lat == 0.0

    def test_fork(self, logger):
        toolkit = GuidanceToolkit(logger=logger)
        assert toolkit.can_be_seen_as_fork(RoadClass.RESIDENTIAL, RoadClass.UNCLASSIFIED)
        assert not toolkit.can_be_seen_as_fork(RoadClass.MOTORWAY, RoadClass.PRIMARY)

    def test_mirror_uses_configured_epsilon(self, logger):
        road = ConnectedRoad(0.5, TurnInstruction(TurnType.TURN, DirectionModifier.SHARP_LEFT))
        tolerant = GuidanceToolkit(
            GuidanceSettings(mirror=MirrorConfig(angle_epsilon=1.0)), logger=logger
        )
        strict = GuidanceToolkit(logger=logger)
        assert tolerant.mirror(road) == road
        assert strict.mirror(road).angle == 359.5

    def test_classify_roundabout(self, logger):
        role = GuidanceToolkit(logger=logger).classify_roundabout(
            TurnInstruction(TurnType.EXIT_ROTARY)
        )
        assert role.is_roundabout
        assert role.leaves
        assert not role.enters

    def test_trim_lane_string_markers_from_settings(self, logger):
        settings = GuidanceSettings(lanes=LaneConfig(placeholder_markers="_"))
        toolkit = GuidanceToolkit(settings, logger=logger)
        assert toolkit.trim_lane_string("__through", 2, 0) == "through"
        logger.info.assert_not_called()

    def test_untouched_lane_string_is_logged(self, logger):
        toolkit = GuidanceToolkit(logger=logger)
        assert toolkit.trim_lane_string("left|through", 1, 0) == "left|through"
        logger.info.assert_called_once_with(
            "Lane string left untouched", lanes="left|through", left=1, right=0
        )


class TestDefaultLogger:
    """Tests for the toolkit's logger when none is injected."""

    def test_silent_until_logging_is_configured(self, capsys):
        """Without configuration no decision reaches stdout."""
        structlog.reset_defaults()
        toolkit = GuidanceToolkit()
        toolkit.requires_name_announced("Main Street", "Oak Avenue")
        toolkit.trim_lane_string("left|through", 1, 0)
        assert capsys.readouterr().out == ""

    def test_events_go_through_stdlib_logging(self, caplog):
        structlog.reset_defaults()
        with caplog.at_level(logging.DEBUG, logger="guidance_toolkit"):
            GuidanceToolkit().requires_name_announced("Main Street", "Oak Avenue")
        assert "Name change" in caplog.text
