"""ScriptAdapter interface - all command execution goes here."""

import logging
import os
import subprocess
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

logger = logging.getLogger(__name__)

ScriptOutput = Tuple[int, str, str]
PathLike = Union[str, Path]


class ScriptAdapter(ABC):
    """Interface for executing run scripts."""

    @abstractmethod
    def execute(self, command: str, working_dir: Optional[PathLike] = None,
                capture: bool = False) -> ScriptOutput:
        """Execute a shell command.

        Args:
            command: Command text, already substituted
            working_dir: Directory to run in (default: current directory)
            capture: If True, buffer stdout/stderr and return them;
                otherwise the command writes straight to the terminal

        Returns:
            (exit code, stdout, stderr); the output strings are empty
            when not capturing
        """
        pass


class ShellScriptAdapter(ScriptAdapter):
    """Real implementation - runs commands through the system shell."""

    def __init__(self, verbose: bool = False, print_commands: bool = True):
        """Initialize with optional verbose mode.

        Args:
            verbose: If True, log working directory and exit code of every command
            print_commands: If True, echo each command to stderr before running it
        """
        self.verbose = verbose
        self.print_commands = print_commands
        # Check for verbose environment variable as well
        if os.environ.get('ACTIONS_VERBOSE'):
            self.verbose = True

    def execute(self, command: str, working_dir: Optional[PathLike] = None,
                capture: bool = False) -> ScriptOutput:
        cwd = str(working_dir) if working_dir is not None else None
        log = logger.info if self.verbose else logger.debug

        log("Running command: %s", command)
        log("Working directory: %s", cwd or os.getcwd())

        if self.print_commands:
            print(command, file=sys.stderr, flush=True)

        if capture:
            result = subprocess.run(command, shell=True, cwd=cwd, capture_output=True,
                                    text=True, errors="replace")
            stdout, stderr = result.stdout, result.stderr
        else:
            # Don't capture, let it flow to terminal
            result = subprocess.run(command, shell=True, cwd=cwd)
            stdout, stderr = '', ''

        log("Exit code: %d", result.returncode)
        return result.returncode, stdout, stderr


class MockScriptAdapter(ScriptAdapter):
    """Mock for testing - records calls."""

    def __init__(self, responses: Optional[Dict[str, ScriptOutput]] = None):
        self.calls = []
        self.responses = dict(responses or {})
        self.default_response: ScriptOutput = (0, '', '')

    def execute(self, command: str, working_dir: Optional[PathLike] = None,
                capture: bool = False) -> ScriptOutput:
        self.calls.append(('execute', command, working_dir, capture))
        return self.responses.get(command, self.default_response)
