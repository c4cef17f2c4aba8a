import sys
from pathlib import Path

import pytest

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent

# Make the package importable without installing it
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from fsm_graphviz import MemorySink, StateMachineAdapter, TupleAdapter  # noqa: E402


def connections(source):
    """Connection statements (`a -> b` / `a -- b`) of a dot document, in order."""
    return [line.strip() for line in source.splitlines()
            if " -> " in line or " -- " in line]


def node_groups(source):
    """
    Lines of every anonymous `{ ... }` block, one list per block.
    The first line of each list is the `node [...]` attribute statement.
    """
    groups, current = [], None
    for line in source.splitlines():
        stripped = line.strip()
        if stripped == "{":
            current = []
        elif stripped == "}" and current is not None:
            groups.append(current)
            current = None
        elif current is not None:
            current.append(stripped)
    return groups


def declared(group):
    return [line.split(" [")[0] for line in group[1:]]


@pytest.fixture
def go_stop():
    return TupleAdapter([("A", "GO", "B"), ("B", "STOP", "A")])


@pytest.fixture
def door_records():
    return [
        {"event": "OPEN", "from_state": "CLOSED", "expected_transition_state": "OPENED"},
        {"event": "CLOSE", "from_state": "OPENED", "expected_transition_state": "CLOSED"},
        {"event": "LOCK", "from_state": "CLOSED", "expected_transition_state": "LOCKED"},
        {"event": "UNLOCK", "from_state": "LOCKED", "expected_transition_state": "CLOSED"},
        {"event": "KNOCK", "from_state": "LOCKED", "expected_transition_state": "LOCKED"},
    ]


@pytest.fixture
def door(door_records):
    return StateMachineAdapter(door_records)


@pytest.fixture
def memory_sink():
    return MemorySink()
