"""Street-name suffix vocabulary.

Names such as "Main Street North" and "Main Street" refer to the same road
for guidance purposes. The suffix table holds the tokens (compass directions,
street types, ...) that may be added, dropped or swapped without the change
being worth announcing.
"""

from collections.abc import Iterable, Iterator

from guidance_toolkit.config import NameConfig


class SuffixTable:
    """Case-insensitive set of recognized name prefix/suffix tokens.

    Lookups expect lower-cased tokens; entries are lower-cased on construction.

    Attributes:
        suffixes: Frozen set of lower-cased tokens
    """

    def __init__(self, suffixes: Iterable[str] = ()) -> None:
        self.suffixes: frozenset[str] = frozenset(s.lower() for s in suffixes)

    @classmethod
    def from_config(cls, config: NameConfig) -> "SuffixTable":
        """Build the table from name configuration.

        Args:
            config: Name configuration holding the suffix vocabulary

        Returns:
            SuffixTable instance
        """
        return cls(config.suffixes)

    def is_suffix(self, possible_suffix: str) -> bool:
        """Check whether a lower-cased token is a recognized suffix."""
        return possible_suffix in self.suffixes

    def __contains__(self, possible_suffix: object) -> bool:
        return possible_suffix in self.suffixes

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.suffixes))

    def __len__(self) -> int:
        return len(self.suffixes)
