"""Exception hierarchy for Guidance Toolkit."""


class GuidanceToolkitError(Exception):
    """Base exception for all Guidance Toolkit errors."""

    pass


class LookupTableError(GuidanceToolkitError):
    """An enum-keyed lookup table does not cover its enumeration."""

    def __init__(self, table_name: str, missing: list[str]) -> None:
        self.table_name = table_name
        self.missing = missing
        super().__init__(
            f"Lookup table '{table_name}' is missing entries for: {', '.join(missing)}"
        )


class ClassificationError(GuidanceToolkitError):
    """Errors related to road or turn classification."""

    pass


class UnknownRoadClassError(ClassificationError):
    """Value is not a member of the road class enumeration."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unknown road class: {value!r}")


class UnknownDirectionModifierError(ClassificationError):
    """Value is not a member of the direction modifier enumeration."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unknown direction modifier: {value!r}")


class GeometryError(GuidanceToolkitError):
    """Errors in geometric calculations."""

    pass


class MissingNodeError(GeometryError):
    """A node referenced by an edge has no known position."""

    def __init__(self, node_id: int) -> None:
        self.node_id = node_id
        super().__init__(f"No position recorded for node {node_id}")
