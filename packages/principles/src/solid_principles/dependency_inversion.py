#!/usr/bin/env python
"""Dependency inversion principle: browsing family relationships.

High-level modules (``Research``) should not depend on low-level modules
(``Relationships``); both depend on an abstraction
(``RelationshipBrowser``). Swapping the storage behind the browser never
touches the research code.
"""

from __future__ import annotations

from abc import abstractmethod
from enum import Enum

from solid_core.domain.capability import Capability
from solid_core.domain.value_object import ValueObject
from solid_specifications import AttributeSpecification, SpecificationFilter

# ─── Domain ───────────────────────────────────────────────────────


class Relationship(str, Enum):
    PARENT = "parent"
    CHILD = "child"
    SIBLING = "sibling"


class Person(ValueObject):
    name: str


class Relation(ValueObject):
    """``source`` stands in ``kind`` relationship to ``target``."""

    source: Person
    kind: Relationship
    target: Person


# ─── Abstraction ──────────────────────────────────────────────────


class RelationshipBrowser(Capability):
    @abstractmethod
    def find_all_children_of(self, name: str) -> list[Person]:
        """Return the children of the person called *name*, in insertion order."""


# ─── Low-level module: storage ────────────────────────────────────


class Relationships(RelationshipBrowser):
    """Stores relations in a list; queries them with specifications."""

    def __init__(self) -> None:
        self._relations: list[Relation] = []

    @property
    def relations(self) -> tuple[Relation, ...]:
        return tuple(self._relations)

    def add_parent_and_child(self, parent: Person, child: Person) -> None:
        self._relations.append(
            Relation(source=parent, kind=Relationship.PARENT, target=child)
        )

    def find_all_children_of(self, name: str) -> list[Person]:
        named = AttributeSpecification[Relation]("source.name", name)
        parenthood = AttributeSpecification[Relation]("kind", Relationship.PARENT)
        matches = SpecificationFilter[Relation]().filter(
            self._relations, named & parenthood
        )
        return [rel.target for rel in matches]


# ─── High-level module: research ──────────────────────────────────


class Research:
    """Depends only on :class:`RelationshipBrowser`."""

    def __init__(self, browser: RelationshipBrowser) -> None:
        self._browser = browser

    def report(self, name: str) -> list[str]:
        return [
            f"{name} has a child named {child.name}"
            for child in self._browser.find_all_children_of(name)
        ]


# ─── Demo ─────────────────────────────────────────────────────────


def main() -> None:
    parent = Person(name="Edward")
    rels = Relationships()
    rels.add_parent_and_child(parent, Person(name="James"))
    rels.add_parent_and_child(parent, Person(name="Genevieve"))

    for line in Research(rels).report("Edward"):
        print(line)


if __name__ == "__main__":
    main()
