"""ActionLoader - loads and validates action lists from YAML or JSON."""

import logging
from pathlib import Path
from typing import List, Optional, Union

import yaml
from pydantic import ValidationError

from .errors import ActionsLoadError
from .schema import Action

logger = logging.getLogger(__name__)


class ActionLoader:
    """
    Loads action lists from YAML files (JSON works too, being valid YAML).

    Validates structure using Pydantic models.
    """

    def __init__(self, base_path: Optional[Union[str, Path]] = None):
        """
        Initialize loader.

        Args:
            base_path: Directory relative paths are resolved against
                (default: current directory)
        """
        if base_path is None:
            base_path = Path.cwd()
        self.base_path = Path(base_path)

    def resolve(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        if not path.is_absolute():
            path = self.base_path / path
        return path

    def load(self, path: Union[str, Path]) -> List[Action]:
        """
        Load an action list from a file.

        Args:
            path: Action file, absolute or relative to base_path

        Returns:
            Validated actions, in file order

        Raises:
            ActionsLoadError: If the file is missing, is not valid YAML,
                or does not describe a list of actions
        """
        action_path = self.resolve(path)

        if not action_path.exists():
            raise ActionsLoadError(action_path, "file not found")

        with open(action_path, 'r') as f:
            text = f.read()

        return self.loads(text, source=action_path)

    def loads(self, text: str, source: Union[str, Path] = "<string>") -> List[Action]:
        """Parse and validate an action list from YAML text."""
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ActionsLoadError(source, f"invalid YAML: {e}") from e

        if data is None:
            return []
        if not isinstance(data, list):
            raise ActionsLoadError(source, f"expected a list of actions, got {type(data).__name__}")

        actions = []
        for i, item in enumerate(data):
            if not isinstance(item, dict):
                raise ActionsLoadError(source, f"action #{i + 1} is not a mapping")
            try:
                actions.append(Action.model_validate(item))
            except ValidationError as e:
                raise ActionsLoadError(source, f"action #{i + 1} is invalid: {e}") from e

        logger.debug("Loaded %d actions from %s", len(actions), source)
        return actions
