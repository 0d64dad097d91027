"""Typed validation failures."""

from enum import Enum


class ValidationErrorKind(str, Enum):
    """Which rule a record broke."""

    EMPTY_FIELD = "empty_field"
    OUT_OF_RANGE = "out_of_range"
    INVALID_STEP = "invalid_step"
    EMPTY_COLLECTION = "empty_collection"
    NEGATIVE = "negative"
    MISSING_COLLECTION = "missing_collection"
    DUPLICATE_NAME = "duplicate_name"


class RestaurantValidationError(ValueError):
    """Raised when a restaurant, menu or document breaks a rule.

    Attributes:
        kind: The rule that failed
        field: Name of the offending field
        path: Location of the offending record, e.g. ``restaurants[2].menus[0]``
        reason: Human readable description of the failure
    """

    def __init__(
        self,
        kind: ValidationErrorKind,
        field: str,
        reason: str,
        path: str = "",
    ) -> None:
        self.kind = kind
        self.field = field
        self.reason = reason
        self.path = path
        super().__init__(self._format())

    def _format(self) -> str:
        location = f"{self.path}.{self.field}" if self.path else self.field
        return f"{location}: {self.reason}"

    @property
    def index(self) -> int | None:
        """Index of the outermost record in ``path``, if any."""
        if not self.path.endswith("]") or "[" not in self.path:
            return None
        head = self.path.split(".", 1)[0]
        return int(head[head.index("[") + 1 : -1])

    def within(self, collection: str, index: int) -> "RestaurantValidationError":
        """Return a copy located inside ``collection[index]``."""
        prefix = f"{collection}[{index}]"
        path = f"{prefix}.{self.path}" if self.path else prefix
        return RestaurantValidationError(self.kind, self.field, self.reason, path)
