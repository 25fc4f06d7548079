"""Street-name change detection.

A traveler should hear about a new street name only when the change is
substantive. Reference-only edits ("Main Street (A1)" -> "Main Street"),
abbreviation-style prefixes and swaps of recognized suffixes
("Main Street" -> "Main Boulevard") are obvious changes that stay silent.

Names arrive in the profile's "{name} ({ref})" encoding. They are parsed into
NameParts, compared through a set of named predicates (NameComparison), and
the predicates are combined by a small decision table of obvious-change rules.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from guidance_toolkit.domain import SuffixTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NameParts:
    """A street name split into its stem and reference.

    Attributes:
        name: Street name without the reference, e.g. "Main Street"
        ref: Reference inside the parentheses, e.g. "A1"
    """

    name: str
    ref: str = ""


def split_name(name: str) -> NameParts:
    """Split a ``"{name} ({ref})"`` string into its parts.

    The stem is the text before the first ``(`` without its separating space,
    the reference is the text up to the next ``)``. A reference with no
    closing parenthesis runs to the end of the string.

    Examples:
        >>> split_name("Main Street (A1)")
        NameParts(name='Main Street', ref='A1')
        >>> split_name("(B 27)")
        NameParts(name='', ref='B 27')
        >>> split_name("Ring (A1")
        NameParts(name='Ring', ref='A1')
    """
    ref_begin = name.find("(")
    if ref_begin == -1:
        return NameParts(name=name)

    stem = name[:ref_begin]
    if stem.endswith(" "):
        stem = stem[:-1]

    ref_end = name.find(")", ref_begin + 1)
    ref = name[ref_begin + 1 :] if ref_end == -1 else name[ref_begin + 1 : ref_end]
    return NameParts(name=stem, ref=ref)


def get_prefix_and_suffix(data: str) -> tuple[str, str]:
    """Lower-cased first and last word of a name.

    Single-word (and empty) names have neither prefix nor suffix.

    Examples:
        >>> get_prefix_and_suffix("North Main Street")
        ('north', 'street')
        >>> get_prefix_and_suffix("Broadway")
        ('', '')
    """
    suffix_pos = data.rfind(" ")
    if suffix_pos == -1:
        return ("", "")

    prefix_pos = data.find(" ")
    return (data[:prefix_pos].lower(), data[suffix_pos + 1 :].lower())


def is_prefix_or_suffix_change(first: str, second: str, suffix_table: SuffixTable) -> bool:
    """Whether two names differ only by a recognized prefix or suffix.

    The first name's token must be recognized (or absent); the rest of both
    names, after cutting each one's own token, must then match exactly.

    Examples:
        >>> table = SuffixTable(["north", "street", "boulevard"])
        >>> is_prefix_or_suffix_change("Main Street", "Main Boulevard", table)
        True
        >>> is_prefix_or_suffix_change("North Main", "South Main", table)
        True
        >>> is_prefix_or_suffix_change("Oak Avenue", "Main Avenue", table)
        False
    """
    first_prefix, first_suffix = get_prefix_and_suffix(first)
    second_prefix, second_suffix = get_prefix_and_suffix(second)

    def recognized(token: str) -> bool:
        return not token or suffix_table.is_suffix(token)

    is_prefix_change = (
        recognized(first_prefix) and first[len(first_prefix) :] == second[len(second_prefix) :]
    )
    is_suffix_change = (
        recognized(first_suffix)
        and first[: len(first) - len(first_suffix)] == second[: len(second) - len(second_suffix)]
    )
    return is_prefix_change or is_suffix_change


@dataclass(frozen=True)
class NameComparison:
    """Named predicates comparing the names and references of two roads."""

    names_empty: bool
    name_contained: bool
    suffix_change: bool
    names_equal: bool
    name_removed: bool
    refs_empty: bool
    ref_contained: bool
    ref_removed: bool

    @classmethod
    def of(
        cls, from_parts: NameParts, to_parts: NameParts, suffix_table: SuffixTable
    ) -> "NameComparison":
        """Evaluate all predicates for a transition from one name to another."""
        from_name, to_name = from_parts.name, to_parts.name
        from_ref, to_ref = from_parts.ref, to_parts.ref

        name_contained = from_name.startswith(to_name) or to_name.startswith(from_name)
        suffix_change = is_prefix_or_suffix_change(from_name, to_name, suffix_table)

        return cls(
            names_empty=not from_name and not to_name,
            name_contained=name_contained,
            suffix_change=suffix_change,
            names_equal=from_name == to_name or name_contained or suffix_change,
            name_removed=bool(from_name) and not to_name,
            refs_empty=not from_ref and not to_ref,
            ref_contained=(
                not from_ref or not to_ref or to_ref in from_ref or from_ref in to_ref
            ),
            ref_removed=bool(from_ref) and not to_ref,
        )

    @classmethod
    def between(cls, from_name: str, to_name: str, suffix_table: SuffixTable) -> "NameComparison":
        """Parse two encoded names and compare them."""
        return cls.of(split_name(from_name), split_name(to_name), suffix_table)

    def matched_rules(self) -> list[str]:
        """Names of the obvious-change rules this comparison satisfies."""
        return [name for name, rule in OBVIOUS_CHANGE_RULES if rule(self)]

    @property
    def is_obvious_change(self) -> bool:
        return any(rule(self) for _, rule in OBVIOUS_CHANGE_RULES)


OBVIOUS_CHANGE_RULES: tuple[tuple[str, Callable[[NameComparison], bool]], ...] = (
    ("empty_names_and_refs", lambda c: c.names_empty and c.refs_empty),
    ("equal_names_contained_refs", lambda c: c.names_equal and c.ref_contained),
    ("equal_names_empty_refs", lambda c: c.names_equal and c.refs_empty),
    ("name_removed_contained_refs", lambda c: c.ref_contained and c.name_removed),
    ("equal_names_ref_removed", lambda c: c.names_equal and c.ref_removed),
    ("suffix_change", lambda c: c.suffix_change),
)


def obvious_change_rules(from_name: str, to_name: str, suffix_table: SuffixTable) -> list[str]:
    """Obvious-change rules matched by a name transition.

    A name appearing where there was none matches no rule. An empty result
    means the change is announced.
    """
    if not from_name and to_name:
        return []
    return NameComparison.between(from_name, to_name, suffix_table).matched_rules()


def requires_name_announced(from_name: str, to_name: str, suffix_table: SuffixTable) -> bool:
    """Decide whether moving from one street name to another must be announced.

    Args:
        from_name: Encoded name of the road being left
        to_name: Encoded name of the road being entered
        suffix_table: Recognized prefix/suffix tokens

    Returns:
        True if the traveler should be told about the new name

    Examples:
        >>> table = SuffixTable(["street", "boulevard"])
        >>> requires_name_announced("", "Main Street", table)
        True
        >>> requires_name_announced("Main Street", "Main Boulevard", table)
        False
    """
    rules = obvious_change_rules(from_name, to_name, suffix_table)
    if rules:
        logger.debug("Name change %r -> %r is obvious: %s", from_name, to_name, ", ".join(rules))
    return not rules
