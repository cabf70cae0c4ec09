"""Variable bag and `{{name}}` substitution for run scripts."""

import re
from typing import Dict

VarBag = Dict[str, str]


def token(key: str) -> str:
    """Return the placeholder text for a variable, e.g. ``{{city}}``."""
    return "{{" + key + "}}"


def substitute(template: str, varbag: VarBag) -> str:
    """Replace every ``{{key}}`` in template with its value from varbag.

    All keys are replaced in a single pass, so values are never expanded a
    second time and the order of keys in the bag does not matter. Tokens
    naming a variable that is not in the bag are left as they are.

    Args:
        template: Command text, e.g. ``"echo {{city}}"``
        varbag: Current variables

    Returns:
        Command text with known variables filled in

    Examples:
        >>> substitute("echo {{city}} {{nope}}", {'city': 'paris'})
        'echo paris {{nope}}'
    """
    if not varbag:
        return template

    # Longest first so a key never shadows a longer key sharing its prefix
    keys = sorted(varbag, key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(token(key)) for key in keys))

    return pattern.sub(lambda match: varbag[match.group(0)[2:-2]], template)
