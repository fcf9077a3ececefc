"""
Constraint-to-query compiler: typed field predicates rendered as scored
queries or unscored filters for a search engine.
"""

from .constraints import (
    AnyConstraint,
    BaseConstraint,
    Bound,
    EqualityConstraint,
    RangeConstraint,
    equal,
    greater_than,
    less_than,
)
from .entity import Entity, EntityRef
from .normalizer import ABSENT, is_absent, normalize
from .querydsl import AnyOf, Composite, Missing, Range, Term, combine

__version__ = "0.1.0"

__all__ = [
    "ABSENT",
    "AnyConstraint",
    "AnyOf",
    "BaseConstraint",
    "Bound",
    "Composite",
    "Entity",
    "EntityRef",
    "EqualityConstraint",
    "Missing",
    "Range",
    "RangeConstraint",
    "Term",
    "combine",
    "equal",
    "greater_than",
    "is_absent",
    "less_than",
    "normalize",
]
