'''
Render state machine transition tables as Graphviz dot documents.
'''

from .adapters import (
    ADAPTERS,
    AdaptError,
    BaseAdapter,
    Edge,
    StateMachineAdapter,
    TransitionAdapter,
    TupleAdapter,
)
from .config import MachineSpec, load_machines, parse_machines
from .emitter import GraphEmitter, node_names, ordered_unique
from .options import ConfigError, GraphOptions
from .sinks import FileSink, GraphWriteError, MemorySink
from .statistics import summarize

__version__ = "0.1.0"

__all__ = [
    "ADAPTERS",
    "AdaptError",
    "BaseAdapter",
    "ConfigError",
    "Edge",
    "FileSink",
    "GraphEmitter",
    "GraphOptions",
    "GraphWriteError",
    "MachineSpec",
    "MemorySink",
    "StateMachineAdapter",
    "TransitionAdapter",
    "TupleAdapter",
    "load_machines",
    "node_names",
    "ordered_unique",
    "parse_machines",
    "summarize",
]
