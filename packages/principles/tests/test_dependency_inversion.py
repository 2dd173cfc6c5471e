from __future__ import annotations

import pytest

from solid_core.primitives.exceptions import AbstractInstantiationError
from solid_principles.dependency_inversion import (
    Person,
    Relationship,
    RelationshipBrowser,
    Relationships,
    Research,
    main,
)


@pytest.fixture
def family() -> Relationships:
    edward = Person(name="Edward")
    james = Person(name="James")
    rels = Relationships()
    rels.add_parent_and_child(edward, james)
    rels.add_parent_and_child(edward, Person(name="Genevieve"))
    rels.add_parent_and_child(james, Person(name="Ada"))
    return rels


class InMemoryBrowser(RelationshipBrowser):
    """A different low-level module behind the same abstraction."""

    def __init__(self, children: dict[str, list[str]]) -> None:
        self._children = children

    def find_all_children_of(self, name: str) -> list[Person]:
        return [Person(name=child) for child in self._children.get(name, [])]


def test_browser_abstraction_cannot_be_instantiated():
    with pytest.raises(AbstractInstantiationError) as exc:
        RelationshipBrowser()
    assert exc.value.missing == ["find_all_children_of"]


def test_add_parent_and_child_records_parent_relation(family: Relationships):
    first = family.relations[0]
    assert first.source == Person(name="Edward")
    assert first.kind is Relationship.PARENT
    assert first.target == Person(name="James")


def test_find_all_children_preserves_insertion_order(family: Relationships):
    assert [p.name for p in family.find_all_children_of("Edward")] == [
        "James",
        "Genevieve",
    ]
    assert [p.name for p in family.find_all_children_of("James")] == ["Ada"]


def test_find_all_children_of_unknown_person(family: Relationships):
    assert family.find_all_children_of("Nobody") == []


def test_relations_view_is_read_only(family: Relationships):
    assert isinstance(family.relations, tuple)
    assert len(family.relations) == 3


def test_research_report(family: Relationships):
    assert Research(family).report("Edward") == [
        "Edward has a child named James",
        "Edward has a child named Genevieve",
    ]


def test_research_works_with_any_browser():
    browser = InMemoryBrowser({"Edward": ["Mary"]})
    assert Research(browser).report("Edward") == ["Edward has a child named Mary"]


def test_main(capsys):
    main()
    assert capsys.readouterr().out.splitlines() == [
        "Edward has a child named James",
        "Edward has a child named Genevieve",
    ]
