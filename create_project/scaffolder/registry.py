"""Template registry lookup."""

from __future__ import annotations

from collections.abc import Mapping

from create_project.config import TemplateEntry

from .errors import UnknownTemplateError


def resolve_template(key: str, templates: Mapping[str, TemplateEntry]) -> TemplateEntry:
    """Return the registry entry for *key*.

    Raises:
        UnknownTemplateError: If *key* is not a registered template. The
            error lists the valid keys in registry order.
    """
    entry = templates.get(key)
    if entry is None:
        raise UnknownTemplateError(key, list(templates))
    return entry
