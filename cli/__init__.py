"""CLI package for running the room condition collector locally."""

from importlib import import_module
from types import ModuleType


def __getattr__(name: str) -> ModuleType:
    if name == "app":
        return import_module("cli.app")
    raise AttributeError(name)

# The Typer application lives in ``cli.app``; it is not re-exported here so that
# ``cli.app`` keeps resolving to the module, which tests patch attributes on.

__all__ = []
