'''
Loads the list of state machines to draw from a JSON file.

Accepted layouts:
  {"machines": [{"name": ..., "adapter": ..., "options": {...}, "transitions": [...]}]}
  [{"name": ..., ...}, ...]
  a single FSM document ({"states": [...], "transitions": [...]}), named after the file
'''

import json
import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Union

from .adapters import ADAPTERS, BaseAdapter
from .emitter import GraphEmitter
from .options import ConfigError, GraphOptions

logger = logging.getLogger(__name__)


@dataclass
class MachineSpec:
    name: str
    adapter: BaseAdapter
    options: GraphOptions = field(default_factory=GraphOptions)

    def emitter(self, sink=None) -> GraphEmitter:
        return GraphEmitter(self.adapter, self.options, sink=sink)


def _machine_from_dict(entry: Dict[str, Any], default_name: str) -> MachineSpec:
    if not isinstance(entry, dict):
        raise ConfigError(f"machine entry must be an object, got {type(entry).__name__}")

    name = entry.get("name", default_name)
    if not isinstance(name, str) or not name:
        raise ConfigError(f"machine name must be a non-empty string, got {name!r}")

    transitions = entry.get("transitions")
    if not isinstance(transitions, list):
        raise ConfigError(f"machine {name!r} needs a 'transitions' list")

    adapter_key = entry.get("adapter", "state_machine")
    adapter_cls = ADAPTERS.get(adapter_key)
    if adapter_cls is None:
        raise ConfigError(f"machine {name!r}: unknown adapter {adapter_key!r} "
                          f"(expected one of {', '.join(ADAPTERS)})")

    raw_options = entry.get("options") or {}
    if not isinstance(raw_options, dict):
        raise ConfigError(f"machine {name!r}: 'options' must be an object")
    # the machine name doubles as the graph name unless options say otherwise
    options = GraphOptions.from_mapping({"name": name, **raw_options})

    return MachineSpec(name=name, adapter=adapter_cls(transitions), options=options)


def parse_machines(data: Any, default_name: str = "graph") -> List[MachineSpec]:
    if isinstance(data, dict) and "machines" in data:
        entries = data["machines"]
    elif isinstance(data, dict) and "transitions" in data:
        # single FSM document, transitions use from/event/to
        entries = [{"name": default_name, "adapter": "transition",
                    "transitions": data["transitions"]}]
    else:
        entries = data

    if not isinstance(entries, list):
        raise ConfigError("expected a list of machines")

    machines = []
    for idx, entry in enumerate(entries):
        machines.append(_machine_from_dict(entry, f"{default_name}_{idx}" if len(entries) > 1 else default_name))
    return machines


def load_machines(path: Union[str, Path]) -> List[MachineSpec]:
    """
    Read machine tables from a JSON file.
    Raises ConfigError if the file is not valid JSON or not shaped as expected.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"{path}: invalid JSON ({e})") from e
    except OSError as e:
        raise ConfigError(f"{path}: cannot read machine file ({e.strerror})") from e

    machines = parse_machines(data, default_name=path.name.split(".")[0])
    logger.debug("Loaded %d machines from %s", len(machines), path)
    return machines


def override_options(machines: List[MachineSpec], **overrides) -> List[MachineSpec]:
    # command-line switches win over per-machine options
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if not overrides:
        return machines
    return [replace(m, options=replace(m.options, **overrides)) for m in machines]
