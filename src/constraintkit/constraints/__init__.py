"""Constraints: equality and range predicates on a single field."""

from typing import Annotated, Union

from pydantic import Field

from .base import BaseConstraint
from .equality import EqualityConstraint, equal
from .range import Bound, RangeConstraint, greater_than, less_than

AnyConstraint = Annotated[Union[EqualityConstraint, RangeConstraint], Field(discriminator="kind")]

__all__ = (
    "AnyConstraint",
    "BaseConstraint",
    "Bound",
    "EqualityConstraint",
    "RangeConstraint",
    "equal",
    "greater_than",
    "less_than",
)
