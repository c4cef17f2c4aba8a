'''
Per-machine counts, as a table.
'''

from typing import Iterable

import pandas as pd

from .emitter import node_names

COLUMNS = ["Machine", "States", "Events", "Transitions", "SelfLoops"]


def summarize(machines: Iterable) -> pd.DataFrame:
    records = []
    for machine in machines:
        edges = machine.adapter.adapt()
        states, events = node_names(edges)
        records.append({
            "Machine": machine.name,
            "States": len(states),
            "Events": len(events),
            "Transitions": len(edges),
            "SelfLoops": sum(1 for e in edges if e.from_state == e.to_state),
        })
    return pd.DataFrame(records, columns=COLUMNS)
