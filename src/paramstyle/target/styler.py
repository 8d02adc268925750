"""The capability a target must expose to be styled by selectors."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Styler(Protocol):
    """Identity facts matched by selectors.

    ``type_name`` is matched by bare selectors (``Layer``), ``style_class``
    holds space-separated class tags matched by ``.cls`` selectors, and
    ``name`` is matched by ``#name`` selectors.

    Targets may also define ``update_params()``, called after a pass that
    changed something, and ``params_root()``, returning the object that
    parameter paths are resolved against (defaults to the target itself).
    """

    @property
    def type_name(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def style_class(self) -> str: ...


def class_tags(target: Styler) -> list[str]:
    """Split the target's class string into individual tags."""
    return (target.style_class or "").split()


def target_label(target: Any) -> str:
    """Short human-readable label for messages: the name, else the type."""
    return getattr(target, "name", "") or getattr(target, "type_name", "") or repr(target)
