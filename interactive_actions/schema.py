"""Pydantic models for actions, interactions and their results."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ActionHook(str, Enum):
    """When an action runs relative to the host program's main work."""

    BEFORE = "Before"
    AFTER = "After"

    @classmethod
    def _missing_(cls, value):
        # Accept 'after', 'AFTER' etc. from hand-written files
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        return None


class InteractionKind(str, Enum):
    """Supported prompt styles."""

    CONFIRM = "confirm"
    INPUT = "input"
    SELECT = "select"


class Interaction(BaseModel):
    """
    A question put to the operator.

    If `out` is set, a successful answer is stored in the variable bag under
    that name and can be used as `{{out}}` in run scripts.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    kind: InteractionKind = Field(..., description="Prompt style: confirm, input or select")
    prompt: str = Field(..., description="What to ask the user")
    out: Optional[str] = Field(None, description="Variable name that receives the answer")
    options: Optional[List[str]] = Field(None, description="Choices for kind=select")
    default: Optional[str] = Field(None, description="Accepted for compatibility, not used")


class Action(BaseModel):
    """
    A single step: an optional interaction, an optional script, and flags
    controlling what happens on cancel and on failure.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    name: str = Field(..., description="Action name, used in results and errors")
    interaction: Optional[Interaction] = Field(None, description="Question to ask before running")
    run: Optional[str] = Field(None, description="Shell command template, may use {{var}}")
    ignore_exit: bool = Field(False, description="Do not fail the run on a non-zero exit code")
    break_if_cancel: bool = Field(False, description="Abort the whole run if the interaction is cancelled")
    capture: bool = Field(False, description="Capture output instead of streaming it to the terminal")
    hook: ActionHook = Field(ActionHook.AFTER, description="Which hook this action belongs to")

    @field_validator("hook", mode="before")
    @classmethod
    def _parse_hook(cls, value):
        if isinstance(value, str):
            return ActionHook(value)
        return value


class ResponseKind(str, Enum):
    TEXT = "text"
    CANCEL = "cancel"
    NONE = "none"


class Response(BaseModel):
    """Outcome of an action's interaction: text, cancel, or no interaction at all."""

    model_config = ConfigDict(frozen=True)

    kind: ResponseKind
    text: Optional[str] = None

    @classmethod
    def text_of(cls, value: str) -> "Response":
        return cls(kind=ResponseKind.TEXT, text=value)

    @classmethod
    def cancel(cls) -> "Response":
        return cls(kind=ResponseKind.CANCEL)

    @classmethod
    def none(cls) -> "Response":
        return cls(kind=ResponseKind.NONE)

    @property
    def is_cancel(self) -> bool:
        return self.kind == ResponseKind.CANCEL

    def __str__(self) -> str:
        if self.kind == ResponseKind.TEXT:
            return f"Text({self.text!r})"
        return self.kind.value.capitalize()


class RunResult(BaseModel):
    """What happened when an action's script ran."""

    script: str = Field(..., description="Command text after variable substitution")
    code: int
    out: str = ""
    err: str = ""


class ActionResult(BaseModel):
    """Result of one action, in the order actions were run."""

    name: str
    run: Optional[RunResult] = None
    response: Response
