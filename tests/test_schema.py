"""Tests for Pydantic schema models."""

import pytest
from pydantic import ValidationError
from interactive_actions.schema import (
    Action, ActionHook, ActionResult, Interaction, InteractionKind, Response, ResponseKind, RunResult
)


def test_action_minimal_valid():
    """Action can be created with just a name; flags default to False."""
    action = Action(name='noop')

    assert action.name == 'noop'
    assert action.interaction is None
    assert action.run is None
    assert action.ignore_exit is False
    assert action.break_if_cancel is False
    assert action.capture is False
    assert action.hook == ActionHook.AFTER


def test_action_with_all_fields():
    """Action can be created with all optional fields."""
    action = Action(
        name='pick',
        interaction={'kind': 'select', 'prompt': 'transport?', 'options': ['bus', 'train'], 'out': 'transport'},
        run='echo {{transport}}',
        ignore_exit=True,
        break_if_cancel=True,
        capture=True,
        hook='Before',
    )

    assert action.interaction.kind == InteractionKind.SELECT
    assert action.interaction.options == ['bus', 'train']
    assert action.interaction.out == 'transport'
    assert action.run == 'echo {{transport}}'
    assert action.ignore_exit is True
    assert action.break_if_cancel is True
    assert action.capture is True
    assert action.hook == ActionHook.BEFORE


def test_action_requires_name():
    """Action without a name is rejected."""
    with pytest.raises(ValidationError):
        Action(run='echo hi')


@pytest.mark.parametrize('value', ['after', 'After', 'AFTER', ' after '])
def test_hook_is_case_insensitive(value):
    assert Action(name='a', hook=value).hook == ActionHook.AFTER


def test_unknown_hook_rejected():
    with pytest.raises(ValidationError):
        Action(name='a', hook='during')


def test_unknown_interaction_kind_rejected():
    with pytest.raises(ValidationError):
        Interaction(kind='password', prompt='secret?')


def test_interaction_requires_prompt():
    with pytest.raises(ValidationError):
        Interaction(kind='input')


def test_interaction_default_is_accepted_and_kept():
    """A default value parses fine; it is carried but not acted on."""
    interaction = Interaction(kind='input', prompt='city?', default='dallas')

    assert interaction.default == 'dallas'


def test_action_is_immutable():
    action = Action(name='a')

    with pytest.raises(ValidationError):
        action.name = 'b'


def test_response_variants():
    assert Response.text_of('x') == Response(kind=ResponseKind.TEXT, text='x')
    assert Response.cancel().is_cancel
    assert not Response.none().is_cancel
    assert Response.none().text is None
    assert Response.text_of('x') != Response.text_of('y')


def test_response_str():
    assert str(Response.text_of('paris')) == "Text('paris')"
    assert str(Response.cancel()) == 'Cancel'
    assert str(Response.none()) == 'None'


def test_action_result_dump():
    result = ActionResult(
        name='c',
        run=RunResult(script='echo paris', code=0, out='paris\n', err=''),
        response=Response.none(),
    )

    assert result.model_dump(mode='json') == {
        'name': 'c',
        'run': {'script': 'echo paris', 'code': 0, 'out': 'paris\n', 'err': ''},
        'response': {'kind': 'none', 'text': None},
    }
