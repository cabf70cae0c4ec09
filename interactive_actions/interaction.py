"""Playing an interaction: render it, ask it, and record the answer."""

import logging
from typing import Optional

from .prompts import Answer, ListItem, PromptAdapter, Question
from .schema import Interaction, InteractionKind, Response
from .varbag import VarBag

logger = logging.getLogger(__name__)


def to_question(interaction: Interaction) -> Question:
    """Convert the interaction into a question for a PromptAdapter."""
    choices = []
    if interaction.kind == InteractionKind.SELECT:
        choices = list(interaction.options or [])

    return Question(kind=interaction.kind, message=interaction.prompt, choices=choices)


def ask(interaction: Interaction, prompts: PromptAdapter) -> Answer:
    return prompts.prompt(to_question(interaction))


def interpret(answer: Answer) -> Response:
    """
    Normalize a raw answer.

    Text and selections become Text, a confirmed question becomes
    Text("true"). A declined confirm, a missing answer, or anything else
    counts as a cancel.
    """
    # Confirm
    if isinstance(answer, bool):
        return Response.text_of("true") if answer else Response.cancel()
    if isinstance(answer, str):
        return Response.text_of(answer)
    if isinstance(answer, ListItem):
        return Response.text_of(answer.label)
    return Response.cancel()


def bind(text: str, out: Optional[str], varbag: VarBag) -> None:
    """Store text in varbag under `out`, if the interaction names one."""
    if out:
        varbag[out] = text


def play(interaction: Interaction, prompts: PromptAdapter, varbag: VarBag) -> Response:
    """
    Ask the interaction's question and record the answer.

    Args:
        interaction: What to ask
        prompts: Where to ask it (terminal or scripted)
        varbag: Variables; updated when the answer is text and `out` is set

    Returns:
        The normalized response

    Raises:
        EOFError: If the prompt adapter runs out of input
    """
    response = interpret(ask(interaction, prompts))

    if response.is_cancel:
        logger.debug("Interaction %r cancelled", interaction.prompt)
    elif interaction.out:
        bind(response.text, interaction.out, varbag)
        logger.debug("Set variable %s", interaction.out)

    return response
