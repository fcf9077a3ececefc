"""Entity shapes recognized by the value normalizer.

An `Entity` is a stored document with an identity. An `EntityRef` is a lazy
reference to such a document, holding only the identity until `get()` is
called. Constraints compare both by identity only.
"""

from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr


class Entity(BaseModel):
    """Base class for stored documents which can be used as constraint values."""

    model_config = ConfigDict(extra="allow")

    id: Optional[str] = Field(None, description="Unique identifier of the stored document.")

    def ref(self) -> "EntityRef":
        """Return a reference to this entity which is already filled."""
        return EntityRef.of(self)


class EntityRef(BaseModel):
    """Reference-by-identity to an `Entity`, resolved lazily through `loader`."""

    id: Optional[str] = Field(None, description="Identifier of the referenced entity.")
    loader: Optional[Callable[[str], Optional[Entity]]] = Field(None, exclude=True, repr=False)

    _value: Optional[Entity] = PrivateAttr(None)

    @classmethod
    def of(cls, entity: Optional[Entity]) -> "EntityRef":
        ref = cls(id=entity.id if entity is not None else None)
        ref._value = entity
        return ref

    @property
    def is_filled(self) -> bool:
        return self.id is not None

    @property
    def is_loaded(self) -> bool:
        return self._value is not None

    def get(self) -> Optional[Entity]:
        """Return the referenced entity, loading it on first access."""
        if self._value is None and self.id is not None and self.loader is not None:
            self._value = self.loader(self.id)
        return self._value

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, EntityRef):
            return self.id == other.id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.id)
