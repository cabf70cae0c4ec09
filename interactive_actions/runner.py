"""ActionRunner - runs a list of actions with adapters injected."""

import logging
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Union

from .errors import ActionCancelledError, ScriptFailedError
from .interaction import play
from .prompts import PromptAdapter, TerminalPromptAdapter
from .schema import Action, ActionHook, ActionResult, Response, RunResult
from .scripts import ScriptAdapter, ShellScriptAdapter
from .varbag import VarBag, substitute

logger = logging.getLogger(__name__)

Progress = Callable[[Action], None]


class ActionRunner:
    """
    Runs actions and keeps track of variables in a varbag.

    Key responsibilities:
    - Filter actions by hook
    - Ask each action's interaction and record the answer
    - Substitute variables into run scripts and execute them
    - Stop the whole run on a break_if_cancel cancel or a failed script
    """

    def __init__(self, prompts: Optional[PromptAdapter] = None,
                 scripts: Optional[ScriptAdapter] = None):
        """
        Initialize the runner.

        Args:
            prompts: PromptAdapter for interactions (default: terminal)
            scripts: ScriptAdapter for run scripts (default: system shell)
        """
        self.prompts = prompts if prompts is not None else TerminalPromptAdapter()
        self.scripts = scripts if scripts is not None else ShellScriptAdapter()

    def run(self, actions: Iterable[Action], working_dir: Optional[Union[str, Path]] = None,
            varbag: Optional[VarBag] = None, hook: Union[ActionHook, str] = ActionHook.AFTER,
            progress: Optional[Progress] = None) -> List[ActionResult]:
        """
        Run every action belonging to hook, in order.

        Args:
            actions: Actions to run; those with a different hook are skipped
            working_dir: Directory scripts run in (default: current directory)
            varbag: Variables, updated in place by interactions with `out`
            hook: Only actions with this hook run
            progress: Called with each action before it is processed

        Returns:
            One ActionResult per action that ran, in order

        Raises:
            ActionCancelledError: If a break_if_cancel interaction was cancelled
            ScriptFailedError: If a script exited non-zero without ignore_exit
        """
        if varbag is None:
            varbag = {}
        hook = ActionHook(hook)

        actions = list(actions)
        selected = [action for action in actions if action.hook == hook]
        logger.debug("Running %d of %d actions for hook %s",
                     len(selected), len(actions), hook.value)

        results = []
        for action in selected:
            if progress is not None:
                progress(action)
            results.append(self._run_action(action, working_dir, varbag))

        return results

    def _run_action(self, action: Action, working_dir: Optional[Union[str, Path]],
                    varbag: VarBag) -> ActionResult:
        logger.debug("Action %s", action.name)

        # Get interactive response from the user if any is defined
        if action.interaction is not None:
            response = play(action.interaction, self.prompts, varbag)
        else:
            response = Response.none()

        if response.is_cancel:
            if action.break_if_cancel:
                logger.info("Action %s cancelled, stopping", action.name)
                raise ActionCancelledError(action.name)
            return ActionResult(name=action.name, run=None, response=response)

        if action.run is None:
            return ActionResult(name=action.name, run=None, response=response)

        script = substitute(action.run, varbag)
        code, out, err = self.scripts.execute(script, working_dir, action.capture)

        if code != 0:
            if not action.ignore_exit:
                logger.warning("Action %s failed with exit code %d", action.name, code)
                raise ScriptFailedError(action.name, code)
            logger.info("Action %s exited with %d (ignored)", action.name, code)

        return ActionResult(
            name=action.name,
            run=RunResult(script=script, code=code, out=out, err=err),
            response=response,
        )
