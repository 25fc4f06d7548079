"""Unit tests for street-name change detection.

Tests cover:
- Parsing of the "{name} ({ref})" encoding, including malformed parentheses
- Prefix/suffix extraction and substitution detection
- The individual obvious-change rules
- End-to-end announcement decisions
"""

import pytest

from guidance_toolkit.core.names import (
    OBVIOUS_CHANGE_RULES,
    NameComparison,
    NameParts,
    get_prefix_and_suffix,
    is_prefix_or_suffix_change,
    requires_name_announced,
    split_name,
)
from guidance_toolkit.domain import SuffixTable


@pytest.fixture
def suffixes() -> SuffixTable:
    """Suffix table with street types and compass directions."""
    return SuffixTable(["street", "boulevard", "avenue", "north", "south", "n", "s"])


@pytest.fixture
def empty_table() -> SuffixTable:
    return SuffixTable()


class TestSplitName:
    """Tests for splitting encoded names."""

    @pytest.mark.parametrize(
        ("encoded", "expected"),
        [
            ("Main Street", NameParts("Main Street", "")),
            ("Main Street (A1)", NameParts("Main Street", "A1")),
            ("(A1)", NameParts("", "A1")),
            ("", NameParts("", "")),
            ("Ring(B2)", NameParts("Ring", "B2")),
            ("Ring (A1; A2)", NameParts("Ring", "A1; A2")),
        ],
    )
    def test_well_formed(self, encoded, expected):
        """Stem and reference are separated at the parentheses."""
        assert split_name(encoded) == expected

    def test_unclosed_reference_runs_to_end(self):
        """A missing closing parenthesis bounds the reference to end of string."""
        assert split_name("Ring (A1") == NameParts("Ring", "A1")

    def test_closing_before_opening(self):
        """A stray ')' before '(' is part of the stem."""
        assert split_name("Ring) (A1") == NameParts("Ring)", "A1")

    def test_only_first_reference_is_read(self):
        """Text after the first reference is ignored."""
        assert split_name("Ring (A1) (B2)") == NameParts("Ring", "A1")


class TestPrefixAndSuffix:
    """Tests for prefix/suffix extraction and substitution."""

    def test_multi_word(self):
        """First and last words are lower-cased."""
        assert get_prefix_and_suffix("North Main Street") == ("north", "street")

    def test_two_words(self):
        assert get_prefix_and_suffix("Main Street") == ("main", "street")

    def test_single_word(self):
        """Single words have neither prefix nor suffix."""
        assert get_prefix_and_suffix("Broadway") == ("", "")

    def test_suffix_swap(self, suffixes):
        """Swapping one recognized suffix for another is a suffix change."""
        assert is_prefix_or_suffix_change("Main Street", "Main Boulevard", suffixes)

    def test_suffix_compared_against_own_last_word(self, suffixes):
        """Each name is cut at its own last word before comparing."""
        assert not is_prefix_or_suffix_change("Main Street North", "Main Street", suffixes)
        assert is_prefix_or_suffix_change("Main Street North", "Main Street South", suffixes)

    def test_prefix_swap(self, suffixes):
        """Swapping a recognized prefix is a prefix change."""
        assert is_prefix_or_suffix_change("North Main", "South Main", suffixes)

    def test_unrecognized_token(self, suffixes):
        """Unrecognized tokens never count as substitutions."""
        assert not is_prefix_or_suffix_change("Main Lane", "Main Road", suffixes)

    def test_different_stem(self, suffixes):
        """A shared suffix does not make different stems equal."""
        assert not is_prefix_or_suffix_change("Oak Avenue", "Main Avenue", suffixes)

    def test_single_word_stems(self, empty_table):
        """Single-word stems only match themselves."""
        assert is_prefix_or_suffix_change("Main", "Main", empty_table)
        assert not is_prefix_or_suffix_change("Main", "Elm", empty_table)


class TestNameComparison:
    """Tests for the named predicates and the obvious-change rules."""

    def test_predicates_for_suffix_swap(self, suffixes):
        """A suffix swap makes the names equal."""
        comparison = NameComparison.between("Main Street", "Main Boulevard", suffixes)
        assert comparison == NameComparison(
            names_empty=False,
            name_contained=False,
            suffix_change=True,
            names_equal=True,
            name_removed=False,
            refs_empty=True,
            ref_contained=True,
            ref_removed=False,
        )
        assert comparison.matched_rules() == [
            "equal_names_contained_refs",
            "equal_names_empty_refs",
            "suffix_change",
        ]

    def test_predicates_for_reference_removal(self, empty_table):
        """Dropping the reference keeps the name and removes the ref."""
        comparison = NameComparison.between("Main Street (A1)", "Main Street", empty_table)
        assert comparison.names_equal
        assert comparison.ref_removed
        assert comparison.ref_contained
        assert "equal_names_ref_removed" in comparison.matched_rules()

    def test_name_removed_with_contained_ref(self, empty_table):
        """Losing the name while keeping the reference is obvious."""
        comparison = NameComparison.between("Main Street (A1)", "(A1)", empty_table)
        assert comparison.name_removed
        assert "name_removed_contained_refs" in comparison.matched_rules()

    def test_empty_names_and_refs(self, empty_table):
        comparison = NameComparison.between("", "", empty_table)
        assert "empty_names_and_refs" in comparison.matched_rules()
        assert comparison.is_obvious_change

    def test_contained_reference(self, empty_table):
        """References that contain one another are treated as the same."""
        comparison = NameComparison.between("Ring (A1)", "Ring (A1; A2)", empty_table)
        assert comparison.ref_contained
        assert not comparison.refs_empty

    def test_rule_names_are_unique(self):
        names = [name for name, _ in OBVIOUS_CHANGE_RULES]
        assert len(names) == len(set(names))

    def test_no_rule_for_new_street(self, empty_table):
        comparison = NameComparison.between("Oak Avenue", "Main Avenue", empty_table)
        assert comparison.matched_rules() == []
        assert not comparison.is_obvious_change


class TestRequiresNameAnnounced:
    """End-to-end announcement decisions."""

    def test_name_appears(self, suffixes):
        """A name appearing where there was none is announced."""
        assert requires_name_announced("", "Main Street", suffixes)

    def test_same_name(self, suffixes):
        assert not requires_name_announced("Main Street", "Main Street", suffixes)

    def test_suffix_swap(self, suffixes):
        assert not requires_name_announced("Main Street", "Main Boulevard", suffixes)

    def test_different_stem_shared_suffix(self, suffixes):
        assert requires_name_announced("Oak Avenue", "Main Avenue", suffixes)

    def test_name_disappears(self, suffixes):
        """Losing the name is not announced."""
        assert not requires_name_announced("Main Street", "", suffixes)

    def test_both_empty(self, suffixes):
        assert not requires_name_announced("", "", suffixes)

    def test_name_extended(self, empty_table):
        """A name that continues the previous one is not announced."""
        assert not requires_name_announced("Main", "Main Street", empty_table)

    def test_reference_added(self, empty_table):
        assert not requires_name_announced("Main Street", "Main Street (A1)", empty_table)

    def test_reference_changed(self, empty_table):
        """Same name with an unrelated reference is announced."""
        assert requires_name_announced("Main Street (A1)", "Main Street (B2)", empty_table)

    def test_reference_changed_with_recognized_suffix(self, suffixes):
        """A recognized suffix on identical names suppresses the announcement."""
        assert not requires_name_announced("Main Street (A1)", "Main Street (B2)", suffixes)

    def test_reference_only_change(self, empty_table):
        """Empty stems match vacuously, so reference-only roads stay silent."""
        assert not requires_name_announced("(A1)", "(B2)", empty_table)

    def test_case_of_suffix_ignored(self, suffixes):
        """Suffix recognition is case-insensitive."""
        assert not requires_name_announced("Main STREET", "Main Boulevard", suffixes)
