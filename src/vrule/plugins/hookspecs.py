"""Pluggy hook specifications for vrule.

Plugins implement hooks with the ``hookimpl`` marker exported here (or an
equivalent ``pluggy.HookimplMarker("vrule")``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pluggy

if TYPE_CHECKING:
    from vrule.core.rule import Rule

hookspec = pluggy.HookspecMarker("vrule")
hookimpl = pluggy.HookimplMarker("vrule")


class VruleHookSpec:
    """Hook specifications for the vrule plugin system."""

    @hookspec
    def register_rules(self) -> dict[str, Rule[Any]] | None:
        """Return name -> rule mappings usable as bare names in schema documents."""
