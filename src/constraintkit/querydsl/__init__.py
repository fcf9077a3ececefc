"""Query DSL module.

Exports the artifacts rendered by constraints and the `Composite` collecting
them. Engine-specific syntax is produced by the `compilers` subpackage.
"""

from .artifacts import AnyOf, Artifact, Bound, FilterArtifact, Missing, QueryArtifact, Range, Term
from .composite import Composite, combine

__all__ = (
    "AnyOf",
    "Artifact",
    "Bound",
    "Composite",
    "FilterArtifact",
    "Missing",
    "QueryArtifact",
    "Range",
    "Term",
    "combine",
)
