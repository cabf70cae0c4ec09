"""Tests for ActionLoader - YAML/JSON loading and validation."""

import json

import pytest
from interactive_actions.errors import ActionsLoadError
from interactive_actions.loader import ActionLoader
from interactive_actions.schema import Action, ActionHook, InteractionKind


@pytest.fixture
def sample_actions_yaml(tmp_path):
    """Create a sample action list YAML file."""
    content = """
- name: start
  interaction:
    kind: confirm
    prompt: "are you ready to start?"
  break_if_cancel: true
- name: city
  interaction:
    kind: input
    prompt: input a city
    out: city
- name: transport
  interaction:
    kind: select
    prompt: pick a transport
    options:
    - bus
    - train
    - bike
    default: bus
    out: transport
  run: echo go for {{city}} on a {{transport}}
- name: prepare
  hook: Before
  run: mkdir -p build
"""
    actions_file = tmp_path / "actions.yaml"
    actions_file.write_text(content)
    return actions_file


def test_loader_load_file(sample_actions_yaml):
    """ActionLoader can load and validate an action list."""
    actions = ActionLoader().load(sample_actions_yaml)

    assert len(actions) == 4
    assert all(isinstance(a, Action) for a in actions)
    assert [a.name for a in actions] == ['start', 'city', 'transport', 'prepare']
    assert actions[0].break_if_cancel is True
    assert actions[2].interaction.kind == InteractionKind.SELECT
    assert actions[2].interaction.options == ['bus', 'train', 'bike']
    assert actions[2].run == 'echo go for {{city}} on a {{transport}}'
    assert actions[3].hook == ActionHook.BEFORE


def test_loader_relative_to_base_path(sample_actions_yaml):
    loader = ActionLoader(base_path=sample_actions_yaml.parent)

    assert len(loader.load('actions.yaml')) == 4


def test_loader_json(tmp_path):
    """JSON action lists load the same way."""
    actions_file = tmp_path / "actions.json"
    actions_file.write_text(json.dumps([
        {'name': 'a', 'run': 'echo a', 'capture': True},
        {'name': 'b', 'interaction': {'kind': 'input', 'prompt': 'x?', 'out': 'x'}},
    ]))

    actions = ActionLoader().load(actions_file)

    assert actions[0].capture is True
    assert actions[1].interaction.out == 'x'


def test_loader_file_not_found(tmp_path):
    """ActionLoader raises error for non-existent file."""
    with pytest.raises(ActionsLoadError) as exc_info:
        ActionLoader(base_path=tmp_path).load('nonexistent.yaml')

    assert 'nonexistent.yaml' in str(exc_info.value)
    assert 'not found' in str(exc_info.value)


def test_loader_empty_document():
    assert ActionLoader().loads("") == []


def test_loader_invalid_yaml():
    """ActionLoader raises error for invalid YAML."""
    with pytest.raises(ActionsLoadError) as exc_info:
        ActionLoader().loads("invalid: yaml: content: [")

    assert 'invalid YAML' in str(exc_info.value)


def test_loader_requires_list():
    with pytest.raises(ActionsLoadError) as exc_info:
        ActionLoader().loads("name: solo\nrun: echo hi\n")

    assert 'expected a list' in str(exc_info.value)


def test_loader_requires_mappings():
    with pytest.raises(ActionsLoadError) as exc_info:
        ActionLoader().loads("- just a string\n")

    assert 'action #1' in str(exc_info.value)


def test_loader_missing_required_fields():
    """ActionLoader validates required fields are present."""
    content = """
- name: ok
- run: echo no name
"""
    with pytest.raises(ActionsLoadError) as exc_info:
        ActionLoader().loads(content, source='inline.yaml')

    assert 'action #2' in str(exc_info.value)
    assert 'inline.yaml' in str(exc_info.value)


def test_loader_bad_interaction_kind():
    content = """
- name: secret
  interaction:
    kind: password
    prompt: token?
"""
    with pytest.raises(ActionsLoadError):
        ActionLoader().loads(content)
