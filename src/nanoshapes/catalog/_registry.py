"""Name-to-factory registry for catalog shapes."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from nanoshapes._constants import CHIRALITIES, FAMILIES
from nanoshapes.model.shape_definition import ShapeDefinition


@dataclass(frozen=True)
class RegisteredShape:
    """A catalog factory and what is known about it without calling it.

    Attributes:
        name: Registry name.
        family: Catalog family.
        factory: Zero-argument function (or, for chiral shapes, a
            function of ``chirality``) returning a
            :class:`ShapeDefinition`.
        chiral: Whether *factory* takes a ``chirality`` argument.
    """

    name: str
    family: str
    factory: Callable[..., ShapeDefinition]
    chiral: bool = False


SHAPES: dict[str, RegisteredShape] = {}
"""All registered shapes, keyed by name, in registration order."""


def register(name: str, family: str, *, chiral: bool = False):
    """Decorator adding a shape factory to :data:`SHAPES`.

    Raises:
        ValueError: If *name* is already registered or *family* is
            unknown.
    """
    if family not in FAMILIES:
        raise ValueError(f"unknown family {family!r}")
    if chiral and any(name.endswith(f"_{hand}") for hand in CHIRALITIES):
        raise ValueError(f"chiral shape name {name!r} must not carry a hand")

    def decorator(factory):
        if name in SHAPES:
            raise ValueError(f"shape {name!r} is already registered")
        SHAPES[name] = RegisteredShape(name, family, factory, chiral)
        return factory

    return decorator
