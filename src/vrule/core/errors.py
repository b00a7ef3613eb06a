"""Exception types for vrule.

Validation itself never raises: a mismatch is the ``Ng`` outcome. These
exceptions cover the edges around it — asserting helpers, schema
compilation, and document loading.
"""

from __future__ import annotations

from pathlib import Path


class VruleError(Exception):
    """Base class for every error raised by vrule."""


class RuleViolation(VruleError):
    """Raised by ``ensure`` when data does not pass a rule."""

    def __init__(self, rule_name: str) -> None:
        self.rule_name = rule_name
        super().__init__(f"The data did not pass validation against {rule_name}")


class SchemaError(VruleError):
    """A declarative schema document could not be compiled.

    Attributes:
        location: Dotted path to the offending node (``""`` for the document).
    """

    def __init__(self, message: str, location: str = "") -> None:
        self.message = message
        self.location = location
        super().__init__(f"{location}: {message}" if location else message)


class DocumentError(VruleError):
    """A schema or data document could not be read or parsed."""

    def __init__(self, message: str, path: Path) -> None:
        self.message = message
        self.path = path
        super().__init__(f"{path}: {message}")
