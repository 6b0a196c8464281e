"""
Type descriptor domain for parsed type specifications.

This module defines the AST produced by the type-specification parser. Every
node is an immutable type descriptor carrying a type name and, for structured
types, the structure payload a downstream validator walks to check values.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import dataclass_transform, ClassVar, TypeAlias

# =============================================================================
# Markers
# =============================================================================

WILDCARD = "*"  # Matches any type name

# =============================================================================
# Type Definitions
# =============================================================================

@dataclass_transform(frozen_default=True)
class TypeDef:
    """Base for type descriptors."""

    _tag: ClassVar[str | None]
    _registry: ClassVar[dict[str, type[TypeDef]]] = {}

    def __init_subclass__(cls, tag: str | None = None, **kwargs):
        super().__init_subclass__(**kwargs)
        dataclass(frozen=True)(cls)
        cls._tag = tag

        if tag is None:
            return

        if existing := TypeDef._registry.get(tag):
            if existing is not cls:
                raise ValueError(
                    f"Tag '{tag}' already registered to {existing}. "
                    f"Choose a different tag."
                )

        TypeDef._registry[tag] = cls

    @property
    def structure(self) -> str | None:
        """Structure tag (array, tuple, fields) or None for a bare name."""
        return self._tag

    @classmethod
    def registry(cls) -> dict[str, type[TypeDef]]:
        return dict(TypeDef._registry)


class NamedType(TypeDef):
    """A bare type name, e.g. ``Number`` or the wildcard ``*``."""

    name: str

    @property
    def of(self) -> None:
        return None


class ArrayType(TypeDef, tag="array"):
    """
    Homogeneous list of values.

    ``of`` is the union of types an element may take and is never empty.
    """

    of: tuple[TypeDef, ...]
    name: str | None = None


class TupleType(TypeDef, tag="tuple"):
    """
    Fixed-length sequence.

    ``of`` holds one union per position; there is always at least one slot.
    """

    of: tuple[tuple[TypeDef, ...], ...]
    name: str | None = None


class FieldsType(TypeDef, tag="fields"):
    """
    Record of named fields.

    ``of`` maps field names to their unions in declaration order and is
    read-only. ``subset`` marks an open record (``{ a: A, ... }``) that
    tolerates extra fields. Equality and hashing ignore field order.
    """

    of: Mapping[str, tuple[TypeDef, ...]] = field(default_factory=dict)
    subset: bool = False
    name: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "of", MappingProxyType(dict(self.of)))

    def __hash__(self) -> int:
        return hash((frozenset(self.of.items()), self.subset, self.name))


Types: TypeAlias = tuple[TypeDef, ...]

MAYBE_EXPANSION: Types = (NamedType("Undefined"), NamedType("Null"))
