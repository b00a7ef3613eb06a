"""Find vrule plugins and feed their rules into the named-rule registry.

Plugins come from two places:

- installed distributions exposing the ``vrule.plugins`` entry-point group
- single ``*.py`` files in a local directory (``.vrule/plugins/`` by default)

A plugin is any object with a ``register_rules`` hookimpl. Broken plugins
are logged, kept in ``warnings``, and skipped; they never stop a command.
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from collections.abc import Iterator
from pathlib import Path
from types import ModuleType

import pluggy

from vrule.plugins.hookspecs import VruleHookSpec
from vrule.schema.registry import register_rule

PROJECT_NAME = "vrule"
ENTRY_POINT_GROUP = "vrule.plugins"
LOCAL_MODULE_PREFIX = "vrule_local_plugin_"

logger = logging.getLogger(__name__)


class PluginManager:
    """Thin wrapper over ``pluggy.PluginManager`` for the ``vrule`` project.

    Every plugin failure is logged (with traceback) and also kept as a
    one-line message in ``warnings`` so commands can report it.
    """

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(VruleHookSpec)
        self._loaded = False
        self._warnings: list[str] = []

    @property
    def is_loaded(self) -> bool:
        """True once discover_and_load() has run."""
        return self._loaded

    @property
    def warnings(self) -> list[str]:
        """Plugin failures seen so far, oldest first."""
        return list(self._warnings)

    def discover_and_load(self, *, local_dir: Path | None = None) -> list[str]:
        """Load entry-point and local plugins, then register their rules.

        Plugins registered earlier with register_plugin() have their rules
        collected here too. Returns the names of every loaded plugin.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._instantiate_class_plugins()
        if local_dir is not None and local_dir.is_dir():
            self._load_local_dir(local_dir)
        for plugin in self._pm.get_plugins():
            self._collect_rules(plugin)
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register *plugin*; after discover_and_load() its rules apply at once."""
        name = name or type(plugin).__name__
        self._pm.register(plugin, name=name)
        logger.debug("Registered plugin: %s", name)
        if self._loaded:
            self._collect_rules(plugin)

    def unregister(self, plugin: object) -> None:
        """Remove *plugin*. Rules it contributed stay in the registry."""
        self._pm.unregister(plugin)

    def list_plugin_names(self) -> list[str]:
        return [self._plugin_name(plugin) for plugin in self._pm.get_plugins()]

    def _plugin_name(self, plugin: object) -> str:
        return self._pm.get_name(plugin) or type(plugin).__name__

    def _record(self, message: str, *, exc_info: bool = False) -> None:
        logger.warning(message, exc_info=exc_info)
        self._warnings.append(message)

    def _import_local_file(self, py_file: Path, module_name: str) -> ModuleType | None:
        spec = importlib.util.spec_from_file_location(module_name, py_file)
        if spec is None or spec.loader is None:
            self._record(f"Cannot import {py_file} as a module")
            return None
        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except Exception:
            sys.modules.pop(module_name, None)
            self._record(f"Failed to load local plugin {py_file}", exc_info=True)
            return None
        return module

    def _load_local_dir(self, local_dir: Path) -> None:
        """Register hookimpl classes from every public ``*.py`` in *local_dir*.

        Each file is imported as ``vrule_local_plugin_<stem>`` and each of
        its plugin classes is instantiated with no arguments.
        """
        for py_file in sorted(local_dir.glob("*.py")):
            if py_file.name.startswith("_"):
                continue
            module_name = f"{LOCAL_MODULE_PREFIX}{py_file.stem}"
            module = self._import_local_file(py_file, module_name)
            if module is None:
                continue
            for cls in self._plugin_classes(module):
                try:
                    self._pm.register(cls(), name=module_name)
                except Exception:
                    self._record(
                        f"Failed to instantiate plugin class {cls.__name__} from {py_file}",
                        exc_info=True,
                    )
                    continue
                logger.debug("Loaded local plugin %s from %s", cls.__name__, py_file)

    def _plugin_classes(self, module: ModuleType) -> Iterator[type]:
        for _, cls in inspect.getmembers(module, inspect.isclass):
            if cls.__module__ == module.__name__ and self._has_hook_impls(cls):
                yield cls

    def _instantiate_class_plugins(self) -> None:
        """Swap plugin classes (as entry points often register) for instances."""
        for plugin in self._pm.get_plugins():
            if not (inspect.isclass(plugin) and self._has_hook_impls(plugin)):
                continue
            name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                self._pm.register(plugin(), name=name)
            except Exception:
                self._record(f"Failed to instantiate entry-point plugin {name}", exc_info=True)
                continue
            logger.debug("Instantiated entry-point plugin: %s", name)

    def _collect_rules(self, plugin: object) -> None:
        """Register the rules returned by *plugin*'s ``register_rules`` hook."""
        hook = getattr(plugin, "register_rules", None)
        if hook is None:
            return
        name = self._plugin_name(plugin)
        try:
            rules = hook()
        except Exception:
            self._record(f"Failed to collect rules from plugin {name}", exc_info=True)
            return
        if rules is None:
            return
        if not isinstance(rules, dict):
            self._record(f"Plugin {name} returned non-dict rule registrations")
            return

        for rule_key, rule in rules.items():
            try:
                register_rule(rule_key, rule)
            except (AttributeError, TypeError, ValueError):
                self._record(
                    f"Skipping rule registration {rule_key!r} from plugin {name}", exc_info=True
                )
            else:
                logger.debug("Plugin %s registered rule %s", name, rule_key)

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Whether *cls* defines a public method marked with ``vrule`` ``@hookimpl``.

        ``pluggy.HookimplMarker("vrule")`` tags the function with a
        ``vrule_impl`` attribute.
        """
        return any(
            getattr(member, f"{PROJECT_NAME}_impl", None)
            for attr, member in inspect.getmembers(cls, callable)
            if not attr.startswith("_")
        )
