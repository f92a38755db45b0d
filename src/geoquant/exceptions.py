"""
geoquant.exceptions
===================

Error types raised by geoquant.

Every error renders its ``template`` with the keyword context given at
construction, so messages stay uniform and the context stays inspectable
(``err.context["uid"]``).
"""

from __future__ import annotations

from typing import Any, Dict


class GeoquantError(Exception):
    template: str = "{message}"

    def __init__(self, message: str = "", **context: Any) -> None:
        self.context: Dict[str, Any] = {"message": message, **context}
        super().__init__(self.message)

    @property
    def message(self) -> str:
        try:
            return self.template.format(**self.context)
        except KeyError:
            return self.context.get("message") or self.template


class UnknownUnitError(GeoquantError, ValueError):
    """No registry entry exists for a unit identifier."""

    template = "Unknown {dimension} unit of measure: {uid!r}"

    def __init__(self, uid: str, dimension: str = "any", **context: Any) -> None:
        self.uid = uid
        self.dimension = dimension
        if "parameter" in context:
            self.template = "Unknown {dimension} unit of measure {uid!r} for parameter {parameter!r}"
        super().__init__(uid=uid, dimension=dimension, **context)


class DimensionMismatchError(GeoquantError, TypeError):
    template = "{operation} requires same dimensions, got {left!r} and {right!r}"


class ConfigurationError(GeoquantError, ValueError):
    template = "Invalid value for {variable}: {value!r}"


__all__ = [
    "GeoquantError",
    "UnknownUnitError",
    "DimensionMismatchError",
    "ConfigurationError",
]
