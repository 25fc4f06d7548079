"""Guidance Toolkit - heuristics for road-network turn instructions.

Guidance Toolkit bundles the small, bug-prone decisions a turn-instruction
pipeline needs while it builds human-facing driving guidance: where a road's
initial direction is sampled, whether a street-name change is worth
announcing, which road classes can form a fork, how to mirror a turn for
left-hand traffic, how to classify roundabout instructions and how to trim
placeholder lanes from lane strings.

Example:
    >>> from guidance_toolkit.core import can_be_seen_as_fork
    >>> from guidance_toolkit.domain import RoadClass
    >>> can_be_seen_as_fork(RoadClass.PRIMARY, RoadClass.SECONDARY)
    False
"""

__version__ = "0.1.0"
__author__ = "Guidance Toolkit Contributors"

__all__ = ["__author__", "__version__"]
