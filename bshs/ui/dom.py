"""Minimal document model: named render targets with text and CSS classes."""

from dataclasses import dataclass, field


@dataclass
class Element:
    id: str
    text: str = ""
    classes: set[str] = field(default_factory=set)

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def add_class(self, name: str) -> None:
        self.classes.add(name)

    def remove_class(self, name: str) -> None:
        self.classes.discard(name)

    def set_class(self, name: str, present: bool) -> None:
        if present:
            self.add_class(name)
        else:
            self.remove_class(name)


class Document:
    def __init__(self) -> None:
        self._elements: dict[str, Element] = {}

    def create(self, element_id: str, text: str = "", classes: set[str] | None = None) -> Element:
        if element_id in self._elements:
            raise ValueError(f"Duplicate element id: {element_id}")
        element = Element(element_id, text, set(classes or ()))
        self._elements[element_id] = element
        return element

    def get(self, element_id: str) -> Element:
        try:
            return self._elements[element_id]
        except KeyError:
            raise KeyError(f"No element with id {element_id!r}") from None

    def __contains__(self, element_id: str) -> bool:
        return element_id in self._elements

    def text_of(self, *element_ids: str) -> dict[str, str]:
        return {i: self.get(i).text for i in element_ids}
