"""Exceptions raised while loading or running actions."""

from pathlib import Path
from typing import Union


class ActionsError(Exception):
    """Base class for all interactive-actions errors."""


class ActionCancelledError(ActionsError):
    """The operator cancelled an interaction on a `break_if_cancel` action."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"in action '{name}': stop requested (break_if_cancel)")


class ScriptFailedError(ActionsError):
    """A run script exited non-zero and the action does not ignore exit codes."""

    def __init__(self, name: str, code: int):
        self.name = name
        self.code = code
        super().__init__(f"in action '{name}': command returned exit code '{code}'")


class ActionsLoadError(ActionsError):
    """An action file could not be read, parsed or validated."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"cannot load actions from {self.path}: {reason}")
