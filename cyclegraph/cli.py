"""
Command line interface for cyclegraph.

Examples::

    cyclegraph 5 --edges
    cyclegraph 5 --neighbors 1 --has-edge 1 5
    cyclegraph 6 --metrics --dtype uint8
"""

import sys
import json
import argparse
import logging

from .config import GraphConfig
from .core.graph import CycleGraph
from .analysis.metrics import CycleGraphMetrics
from .utils.logger import setup_logger

logger = logging.getLogger('cyclegraph.cli')


def build_parser():
    """Create the command line argument parser."""
    parser = argparse.ArgumentParser(prog='cyclegraph',
                                     description='Query the cycle graph on NV vertices')

    parser.add_argument('nv', type=int,
                        help='Number of vertices')

    parser.add_argument('--dtype', type=str, default=None,
                        help="Vertex type: 'int' or a numpy integer name such as 'uint8'")

    parser.add_argument('--config', type=str, default=None,
                        help='JSON file with settings')

    parser.add_argument('--edges', action='store_true',
                        help='List the edges')

    parser.add_argument('--neighbors', type=int, metavar='V', default=None,
                        help='List the neighbors of vertex V')

    parser.add_argument('--has-edge', type=int, nargs=2, metavar=('U', 'V'), default=None,
                        help='Test whether U and V are adjacent')

    parser.add_argument('--metrics', action='store_true',
                        help='Print structural metrics as JSON')

    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')

    return parser


def main(argv=None):
    """Entry point of the ``cyclegraph`` command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        overrides = {'default_dtype': args.dtype} if args.dtype else None
        config = GraphConfig(config_dict=overrides, config_file=args.config)
        setup_logger('cyclegraph', logging.DEBUG if args.verbose else config.get_log_level())
        graph = CycleGraph.from_config(args.nv, config)
    except (ValueError, TypeError, FileNotFoundError) as e:
        parser.error(str(e))

    logger.debug("Created %r", graph)
    print(f"{graph!r}: {len(graph)} vertices, {graph.edge_count()} edges")

    if args.edges:
        for e in graph.edges():
            print(f"{e.src} {e.dst}")

    if args.neighbors is not None:
        if not graph.has_vertex(args.neighbors):
            parser.error(f"vertex {args.neighbors} not in 1..{len(graph)}")
        print(" ".join(str(u) for u in graph.neighbors(args.neighbors)))

    if args.has_edge is not None:
        u, v = args.has_edge
        print(str(graph.has_edge(u, v)).lower())

    if args.metrics:
        summary = CycleGraphMetrics(graph).summary()
        summary['girth'] = None if summary['girth'] == float('inf') else summary['girth']
        print(json.dumps(summary, indent=2))

    return 0


if __name__ == '__main__':
    sys.exit(main())
