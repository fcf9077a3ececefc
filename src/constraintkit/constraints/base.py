"""Shared constraint capability.

A constraint renders to at most one scored query artifact and at most one
unscored filter artifact. Configuration happens through fluent calls which
return a new frozen constraint, so artifacts rendered earlier never change.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator

from ..exceptions import MissingFieldError
from ..logger import get_logger
from ..normalizer import ABSENT, is_absent, normalize
from ..querydsl.artifacts import FilterArtifact, QueryArtifact
from ..settings import settings

__all__ = ("BaseConstraint",)

logger = get_logger(__name__)

C = TypeVar("C", bound="BaseConstraint")


class BaseConstraint(BaseModel, ABC):
    """Abstract base for all constraints.

    Subclasses implement `_build_query`, `_build_filter` and `describe`.
    The value is normalized once, when the constraint is validated; fluent
    calls copy the model without validating it again.
    """

    model_config = ConfigDict(frozen=True)

    field: str
    value: Any = ABSENT
    as_filter_mode: bool = False

    @field_validator("field")
    @classmethod
    def _require_field(cls, v: str) -> str:
        if not v:
            raise MissingFieldError("Field name must not be empty", field=v, operation=cls.__name__)
        return v

    @field_validator("value", mode="before")
    @classmethod
    def _normalize_value(cls, v: Any) -> Any:
        return normalize(v)

    @field_serializer("value")
    def _serialize_value(self, v: Any) -> Any:
        # Dumped as None, which the validator above reads back as ABSENT
        return None if is_absent(v) else v

    @property
    def has_value(self) -> bool:
        return not is_absent(self.value)

    def as_filter(self: C) -> C:
        """Force this constraint to be applied as filter instead of query."""
        return self.model_copy(update={"as_filter_mode": True})

    def render_as_query(self) -> Optional[QueryArtifact]:
        """Return the scored query artifact, or None if the constraint has none."""
        artifact = self._build_query()
        self._log_render("query", artifact)
        return artifact

    def render_as_filter(self) -> Optional[FilterArtifact]:
        """Return the unscored filter artifact, or None if the constraint has none."""
        artifact = self._build_filter()
        self._log_render("filter", artifact)
        return artifact

    @abstractmethod
    def _build_query(self) -> Optional[QueryArtifact]:
        raise NotImplementedError

    @abstractmethod
    def _build_filter(self) -> Optional[FilterArtifact]:
        raise NotImplementedError

    @abstractmethod
    def describe(self, redact_values: bool = False) -> str:
        """Return a readable form of this constraint.

        Args:
            redact_values: replace the value by a placeholder, for logging
        """
        raise NotImplementedError

    def _display_value(self, redact_values: bool) -> Any:
        return settings.REDACTED_VALUE if redact_values else self.value

    def _log_render(self, mode: str, artifact: Optional[Any]) -> None:
        if not logger.is_debug:
            return
        if artifact is None:
            logger.debug("No %s for %s", mode, self.describe(redact_values=True))
        else:
            logger.debug("Rendered %s %s for %s", artifact.kind, mode, self.describe(redact_values=True))

    def __str__(self) -> str:
        return self.describe(redact_values=False)

    def __hash__(self) -> int:
        # Values may be unhashable (lists), the description never is
        return hash((self.__class__, self.describe(redact_values=False)))
