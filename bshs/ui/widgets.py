"""Two-state toggle widgets (modal, chatbot panel, banners).

A widget's open flag lives in PageState under ``widget.<name>``; the widget
subscribes to that key and mirrors it onto its element's CSS class, so the
flag and the class never disagree.
"""

from bshs.ui.dom import Document
from bshs.ui.state import PageState

HIDDEN_CLASS = "hidden"


class ToggleWidget:
    def __init__(
        self,
        name: str,
        element_id: str,
        document: Document,
        state: PageState,
        css_class: str = HIDDEN_CLASS,
        class_when_open: bool = False,
        initially_open: bool = False,
    ):
        self.name = name
        self.element_id = element_id
        self.document = document
        self.state = state
        self.css_class = css_class
        self.class_when_open = class_when_open

        state.subscribe(self.state_key, self._on_change)
        if not state.set(self.state_key, initially_open):
            self._mirror(initially_open)

    @property
    def state_key(self) -> str:
        return f"widget.{self.name}"

    @property
    def is_open(self) -> bool:
        return bool(self.state.get(self.state_key, False))

    def open(self) -> None:
        self.state.set(self.state_key, True)

    def close(self) -> None:
        self.state.set(self.state_key, False)

    def toggle(self) -> None:
        self.state.set(self.state_key, not self.is_open)

    def is_consistent(self) -> bool:
        """True when the element's class matches the open flag."""
        element = self.document.get(self.element_id)
        return element.has_class(self.css_class) == (self.is_open == self.class_when_open)

    def _on_change(self, key: str, value: object) -> None:
        self._mirror(bool(value))

    def _mirror(self, is_open: bool) -> None:
        self.document.get(self.element_id).set_class(
            self.css_class, is_open == self.class_when_open
        )


class WidgetRegistry:
    """Widgets by name plus the control-id → action table used for clicks."""

    def __init__(self) -> None:
        self._widgets: dict[str, ToggleWidget] = {}
        self._controls: dict[str, tuple[str, str]] = {}

    def add(self, widget: ToggleWidget) -> ToggleWidget:
        self._widgets[widget.name] = widget
        return widget

    def bind(self, control_id: str, widget_name: str, action: str) -> None:
        if action not in ("open", "close", "toggle"):
            raise ValueError(f"Unknown widget action: {action}")
        if widget_name not in self._widgets:
            raise KeyError(f"Unknown widget: {widget_name}")
        self._controls[control_id] = (widget_name, action)

    def get(self, name: str) -> ToggleWidget:
        return self._widgets[name]

    def click(self, control_id: str) -> bool:
        """Run the action bound to a control. Returns False for unbound controls."""
        binding = self._controls.get(control_id)
        if binding is None:
            return False
        widget_name, action = binding
        getattr(self._widgets[widget_name], action)()
        return True

    def __iter__(self):
        return iter(self._widgets.values())
