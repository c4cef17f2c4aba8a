'''
Draw every state machine listed in a JSON file.

    python -m fsm_graphviz machines.json -o graphs --directed
    dot -Tsvg graphs/Door.gv.txt -o Door.svg
'''

import argparse
import logging
import sys

from .adapters import AdaptError
from .config import load_machines, override_options
from .options import STYLES, ConfigError
from .sinks import FileSink, GraphWriteError
from .statistics import summarize


def build_parser():
    parser = argparse.ArgumentParser(
        prog="fsm_graphviz",
        description="Render state machine transition tables as Graphviz (dot) documents."
    )
    parser.add_argument("machines", help="JSON file with the transition tables")
    parser.add_argument("-o", "--output-dir", default=".",
                        help="directory the .gv.txt files are written to (default: current directory)")
    parser.add_argument("--only", nargs="+", metavar="NAME",
                        help="only draw the machines with these names")
    parser.add_argument("--style", choices=STYLES, default=None,
                        help="override the output style of every machine")
    parser.add_argument("--directed", action="store_true", default=None,
                        help="force directed graphs")
    parser.add_argument("--format", dest="render_format", default=None,
                        help="also render an image (png, svg, pdf, ...) with the dot executable")
    parser.add_argument("--stats", action="store_true",
                        help="print a table of states/events/transitions per machine")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        machines = load_machines(args.machines)
        machines = override_options(machines, style=args.style, directed=args.directed)
        if args.only:
            missing = set(args.only) - {m.name for m in machines}
            if missing:
                raise ConfigError(f"no machine named {', '.join(sorted(missing))}")
            machines = [m for m in machines if m.name in args.only]

        sink = FileSink(args.output_dir, render_format=args.render_format)
        for machine in machines:
            out_path = machine.emitter(sink).create_graph()
            print(f"{machine.name} diagram saved to {out_path}")

        if args.stats:
            print(summarize(machines).to_string(index=False))
    except (ConfigError, AdaptError, GraphWriteError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
