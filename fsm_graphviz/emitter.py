'''
Renders the edges produced by an adapter into a Graphviz dot document.

Every transition becomes two connections through an event node:
    from_state -> event -> to_state
so events show up as their own boxes between the states they link.
'''

import logging
from typing import Iterable, List, Mapping, Tuple, Union

import graphviz
from graphviz.quoting import quote

from .adapters import BaseAdapter, Edge
from .options import GraphOptions
from .sinks import FileSink, GraphWriteError

logger = logging.getLogger(__name__)


def ordered_unique(names: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(names))


def node_names(edges: Iterable[Edge]) -> Tuple[List[str], List[str]]:
    """
    Return (state_names, event_names), each deduplicated in first-seen order.
    A state is seen when it appears as `from` or `to`, from before to within an edge.
    """
    states, events = [], []
    for edge in edges:
        states.append(edge.from_state)
        events.append(edge.event)
        states.append(edge.to_state)
    return ordered_unique(states), ordered_unique(events)


class GraphEmitter:
    """
    Turns one adapter's edges into dot text and hands it to a sink.

    `render()` only builds the text; `create_graph()` builds it, stores it
    in `source` and writes it out through the sink under the graph name.
    """

    def __init__(self, adapter: BaseAdapter,
                 options: Union[GraphOptions, Mapping, None] = None,
                 sink=None):
        if options is None:
            options = GraphOptions()
        elif not isinstance(options, GraphOptions):
            options = GraphOptions.from_mapping(options)
        self._adapter = adapter
        self.options = options
        self.sink = sink if sink is not None else FileSink()
        self._source = ""

    @property
    def source(self) -> str:
        # text of the last create_graph() run
        return self._source

    def _new_graph(self):
        graph_cls = graphviz.Digraph if self.options.directed else graphviz.Graph
        return graph_cls(name=self.options.name or None)

    def _styled(self, states: List[str], events: List[str]):
        opts = self.options
        dot = self._new_graph()
        dot.attr(fontname=opts.fontname)
        dot.attr(beautify="true")
        dot.attr("node", fontname=opts.fontname)
        dot.attr("edge", fontname=opts.fontname)
        dot.attr("graph", rankdir="LR")
        dot.attr(splines="ortho")

        with dot.subgraph() as group:
            group.attr("node", shape=opts.resolved_state_shape, colorscheme=opts.colorscheme,
                       style="filled", width="0", height="0.1")
            for state in states:
                group.node(state, fillcolor=opts.state_fillcolor, fontcolor=opts.state_fontcolor)

        with dot.subgraph() as group:
            group.attr("node", shape=opts.event_shape, width="0", height="0.1")
            for event in events:
                group.node(event)
        return dot

    def _compact(self, states: List[str], events: List[str]):
        opts = self.options
        dot = self._new_graph()
        dot.attr(rankdir="LR")
        for shape, names in ((opts.resolved_state_shape, states), (opts.event_shape, events)):
            parts = [f"node [shape={quote(shape)}]"] + [quote(name) for name in names]
            dot.body.append("\t{" + " ".join(parts) + "}\n")
        return dot

    def render(self) -> str:
        edges = self._adapter.adapt()
        states, events = node_names(edges)
        logger.debug("graph %r: %d edges, %d states, %d events",
                     self.options.name, len(edges), len(states), len(events))

        if self.options.style == "compact":
            dot = self._compact(states, events)
        else:
            dot = self._styled(states, events)

        for edge in edges:
            dot.edge(edge.from_state, edge.event)
            dot.edge(edge.event, edge.to_state)
        return dot.source

    def create_graph(self, sink=None):
        """
        Render the document and persist it; returns whatever the sink returns
        (the written path for FileSink). Raises GraphWriteError if the sink fails.
        """
        self._source = self.render()
        target = sink if sink is not None else self.sink
        try:
            return target.write(self.options.name, self.source)
        except GraphWriteError:
            raise
        except Exception as e:
            logger.exception("Sink %r failed for graph %r", target, self.options.name)
            raise GraphWriteError() from e
