#!/usr/bin/env python3
"""Demo: confirm, ask for a city, pick a transport, then echo the plan."""

from interactive_actions import ActionLoader, ActionRunner, ActionsError

YAML = """
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
"""


def main():
    actions = ActionLoader().loads(YAML)
    runner = ActionRunner()
    varbag = {}

    try:
        results = runner.run(actions, None, varbag, progress=lambda action: print(action.name))
    except ActionsError as e:
        print(f"Error: {e}")
        return

    for result in results:
        print(result)


if __name__ == "__main__":
    main()
