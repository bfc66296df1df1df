#!/usr/bin/env python3
"""graphprep CLI - preprocess graph JSON for layout algorithms."""

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from .adjacency import build_adjacency
from .components import find_extra_nodes
from .config import configure_logging, settings
from .edges import remove_repeated_edges
from .models import GraphInput
from .preprocess import ordered_components, pick_start_node, preprocess_graph
from .validation import validate_graph, validation_summary

logger = logging.getLogger(__name__)


def _json_out(data, code=0):
    print(json.dumps(data, indent=settings.json_indent))
    sys.exit(code)


def _error_out(message):
    _json_out({"status": "error", "error": message}, code=1)


def _load_graph(path):
    """Read a graph JSON document from a file path or '-' for stdin."""
    try:
        if path == "-":
            raw = sys.stdin.read()
        else:
            with open(path, encoding="utf-8") as f:
                raw = f.read()
    except OSError as e:
        _error_out(f"Cannot read {path}: {e}")

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        _error_out(f"Invalid JSON: {e}")

    if not isinstance(data, dict):
        _error_out("Graph document must be a JSON object")

    try:
        return GraphInput.from_json_dict(data)
    except ValidationError as e:
        _error_out(f"Invalid graph: {e.error_count()} validation error(s): {e}")


def _apply_overrides(graph, args):
    updates = {}
    if getattr(args, "directed", None) is not None:
        updates["directed"] = args.directed
    if getattr(args, "start_node", None):
        updates["start_node"] = args.start_node
    return graph.model_copy(update=updates) if updates else graph


# ── Commands ─────────────────────────────────────────────────────────────────

def cmd_adjacency(graph, args):
    _json_out({
        "status": "ok",
        "directed": graph.directed,
        "adjacency": build_adjacency(graph.edges, graph.directed)
    })


def cmd_start_node(graph, args):
    adjacency = build_adjacency(graph.edges, graph.directed)
    start_node, explicit = pick_start_node(graph, adjacency)
    _json_out({"status": "ok", "start_node": start_node, "explicit": explicit})


def cmd_components(graph, args):
    components = ordered_components(graph)
    _json_out({
        "status": "ok",
        "components": [[n.id for n in component] for component in components]
    })


def cmd_dedupe(graph, args):
    edges = remove_repeated_edges(graph.edges)
    _json_out({"status": "ok", "edges": [e.to_json_dict() for e in edges]})


def cmd_extras(graph, args):
    extras = find_extra_nodes(graph.nodes, graph.edges, graph.custom_nodes)
    _json_out({"status": "ok", "extra_nodes": [n.id for n in extras]})


def cmd_preprocess(graph, args):
    _json_out({"status": "ok", **preprocess_graph(graph).to_dict()})


def cmd_validate(graph, args):
    issues = validate_graph(graph)
    _json_out({
        "status": "ok",
        "issues": [issue.to_dict() for issue in issues],
        "summary": validation_summary(issues)
    })


def cmd_serve(args):
    import uvicorn
    from .api import app

    uvicorn.run(app, host=args.host, port=args.port)


GRAPH_COMMANDS = {
    "adjacency": cmd_adjacency,
    "start-node": cmd_start_node,
    "components": cmd_components,
    "dedupe": cmd_dedupe,
    "extras": cmd_extras,
    "preprocess": cmd_preprocess,
    "validate": cmd_validate,
}


def build_parser():
    parser = argparse.ArgumentParser(prog="graphprep", description="Graph layout preprocessing")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    for name in GRAPH_COMMANDS:
        p = sub.add_parser(name)
        p.add_argument("graph", nargs="?", default="-", help="Graph JSON file, '-' for stdin")
        group = p.add_mutually_exclusive_group()
        group.add_argument("--directed", dest="directed", action="store_true", default=None)
        group.add_argument("--undirected", dest="directed", action="store_false")
        p.add_argument("--start-node", default=None)

    p = sub.add_parser("serve")
    p.add_argument("--host", default=settings.api_host)
    p.add_argument("--port", type=int, default=settings.api_port)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    if args.command == "serve":
        cmd_serve(args)
        return

    graph = _apply_overrides(_load_graph(args.graph), args)
    logger.debug("Running %s on %d nodes / %d edges", args.command, len(graph.nodes), len(graph.edges))
    GRAPH_COMMANDS[args.command](graph, args)


if __name__ == "__main__":
    main()
