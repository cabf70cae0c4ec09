"""interactive-actions - run declarative prompts and shell scripts."""

from .errors import ActionsError, ActionCancelledError, ScriptFailedError, ActionsLoadError
from .loader import ActionLoader
from .prompts import PromptAdapter, TerminalPromptAdapter, ScriptedPromptAdapter, Question, ListItem
from .runner import ActionRunner
from .schema import Action, ActionHook, ActionResult, Interaction, InteractionKind, Response, ResponseKind, RunResult
from .scripts import ScriptAdapter, ShellScriptAdapter, MockScriptAdapter
from .varbag import VarBag, substitute

__all__ = [
    'ActionRunner',
    'ActionLoader',
    'Action',
    'ActionHook',
    'ActionResult',
    'Interaction',
    'InteractionKind',
    'Response',
    'ResponseKind',
    'RunResult',
    'VarBag',
    'substitute',
    'PromptAdapter',
    'TerminalPromptAdapter',
    'ScriptedPromptAdapter',
    'Question',
    'ListItem',
    'ScriptAdapter',
    'ShellScriptAdapter',
    'MockScriptAdapter',
    'ActionsError',
    'ActionCancelledError',
    'ScriptFailedError',
    'ActionsLoadError',
]
