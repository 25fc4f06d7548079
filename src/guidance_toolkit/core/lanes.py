"""Lane string trimming.

Public service vehicle lanes and similar can introduce additional lanes into
the lane string that are not specifically marked for left/right turns. The
profile knows how many of them sit at either side of the road and uses
``trim_lane_string`` to drop them:

    left|through|   with one psv lane on the right  ->  left|through

whereas without a psv lane ``left|through|`` means ``left|through|through``.
"""

import logging

logger = logging.getLogger(__name__)

# '&' stands in for '|' where the test tooling cannot escape multiple pipes
PLACEHOLDER_MARKERS = "|&"


def _is_placeholder_run(run: str, markers: str) -> bool:
    return all(char in markers for char in run)


def trim_lane_string(
    lane_string: str,
    count_left: int,
    count_right: int,
    markers: str = PLACEHOLDER_MARKERS,
) -> str:
    """Remove placeholder lanes from either side of a lane string.

    A side is only trimmed when every character to be removed is a
    placeholder marker and at least one character would remain; otherwise
    that side is left untouched.

    Args:
        lane_string: Encoded lanes, e.g. ``"||through|right"``
        count_left: Placeholder lanes to drop from the front
        count_right: Placeholder lanes to drop from the back
        markers: Characters that denote an unmarked lane

    Returns:
        The trimmed lane string

    Examples:
        >>> trim_lane_string("||through|right", 2, 0)
        'through|right'
        >>> trim_lane_string("left|through", 1, 0)
        'left|through'
    """
    if count_left > 0:
        if count_left < len(lane_string) and _is_placeholder_run(
            lane_string[:count_left], markers
        ):
            lane_string = lane_string[count_left:]
        else:
            logger.debug("Refusing to trim %d lanes from the left of %r", count_left, lane_string)

    if count_right > 0:
        if count_right < len(lane_string) and _is_placeholder_run(
            lane_string[-count_right:], markers
        ):
            lane_string = lane_string[:-count_right]
        else:
            logger.debug(
                "Refusing to trim %d lanes from the right of %r", count_right, lane_string
            )

    return lane_string
