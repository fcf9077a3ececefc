from typing import Literal, Optional

from pydantic import field_validator

from ..querydsl.artifacts import FilterArtifact, Missing, QueryArtifact, Term
from ..settings import settings
from .base import BaseConstraint

__all__ = ("EqualityConstraint", "equal")


class EqualityConstraint(BaseConstraint):
    """Checks that a field has the given value.

    An absent value can never be scored, so it always renders as a
    "field is missing" filter, unless `ignore_absent_values()` was called,
    in which case the constraint contributes nothing.
    """

    kind: Literal["equal"] = "equal"
    ignore_absent: bool = False

    @field_validator("field")
    @classmethod
    def _remap_identity(cls, v: str) -> str:
        # The engine addresses documents by its reserved identity field
        if v.lower() == settings.ENTITY_ID_FIELD.lower():
            return settings.ID_FIELD
        return v

    def ignore_absent_values(self) -> "EqualityConstraint":
        """Make the constraint render nothing at all for an absent value."""
        return self.model_copy(update={"ignore_absent": True})

    def _build_query(self) -> Optional[QueryArtifact]:
        if not self.has_value or self.as_filter_mode:
            return None
        return Term(field=self.field, value=self.value)

    def _build_filter(self) -> Optional[FilterArtifact]:
        if not self.has_value:
            if self.ignore_absent:
                return None
            return Missing(field=self.field)
        if self.as_filter_mode:
            return Term(field=self.field, value=self.value)
        return None

    def describe(self, redact_values: bool = False) -> str:
        return f"{self.field} = '{self._display_value(redact_values)}'"


def equal(field: str, value: object) -> EqualityConstraint:
    """Create a constraint checking that `field` equals `value`.

    Args:
        field: the field to check; ``id`` is mapped onto the identity field
        value: the expected value, normalized immediately

    Returns:
        a new constraint rendering as query by default
    """
    return EqualityConstraint(field=field, value=value)
