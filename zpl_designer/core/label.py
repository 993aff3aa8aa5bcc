from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from .component import Component


log = logging.getLogger(__name__)


class LabelSize:
    """
    Printhead densities in dots per inch (^LL: inches x dpi = dots) and the
    default 4 x 6 inch label.
    """
    DEFAULT_WIDTH_INCHES = 4
    DEFAULT_HEIGHT_INCHES = 6

    DPMM_6 = 152
    DPMM_8 = 203
    DPMM_12 = 305
    DPMM_24 = 610


class Label:
    """
    The canvas: an ordered list of components and the canvas size they are
    laid out against.

    Components are emitted in insertion order; later ones print over
    earlier ones.
    """

    def __init__(
        self,
        width_inches: float = LabelSize.DEFAULT_WIDTH_INCHES,
        height_inches: float = LabelSize.DEFAULT_HEIGHT_INCHES,
        dpi: int = LabelSize.DPMM_8,
    ):
        self.dpi = int(dpi)
        self.label_width = int(width_inches * self.dpi)
        self.label_height = int(height_inches * self.dpi)
        self._components: List[Component] = []

    @classmethod
    def from_dots(cls, width: int, height: int, dpi: int = LabelSize.DPMM_8) -> "Label":
        label = cls(0, 0, dpi)
        label.label_width = int(width)
        label.label_height = int(height)
        return label

    # ---- canvas ----

    def get_label_width(self) -> int:
        return self.label_width

    def get_label_height(self) -> int:
        return self.label_height

    @property
    def is_valid(self) -> bool:
        return self.label_width > 0 and self.label_height > 0

    # ---- components ----

    @property
    def components(self) -> Tuple[Component, ...]:
        return tuple(self._components)

    def add_component(self, component: Component) -> None:
        if component is None:
            return
        # components laid out without a canvas get the label's
        if component.label_width == 0 and component.label_height == 0:
            component.set_label_size(self.label_width, self.label_height)
        self._components.append(component)

    def add_all_components(self, *components: Component) -> None:
        for component in components:
            self.add_component(component)

    def extend(self, components: Iterable[Component]) -> None:
        self.add_all_components(*components)

    def get_component(self, component_id: str) -> Optional[Component]:
        for component in self._components:
            if component.id == component_id:
                return component
        return None

    def remove_component(self, component: Component) -> bool:
        try:
            self._components.remove(component)
        except ValueError:
            return False
        return True

    def clear(self) -> None:
        self._components.clear()

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self):
        return iter(self._components)

    # ---- output ----

    def get_label_code(self) -> str:
        """Regenerate every component and join the instructions, one per line."""
        lines = []
        for component in self._components:
            component.generate_instruction()
            lines.append(component.instruction)
        log.debug("Generated %d component(s) for %dx%d label",
                  len(lines), self.label_width, self.label_height)
        return "\n".join(lines)

    def to_zpl(self) -> str:
        """Complete document: ^XA, print width, label length, components, ^XZ."""
        body = self.get_label_code()
        lines = ["^XA", f"^PW{self.label_width}", f"^LL{self.label_height}"]
        if body:
            lines.append(body)
        lines.append("^XZ")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.get_label_code()
