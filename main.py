"""
kontent-source - Main Entry Point

Runs one sourcing pass for a Kontent project against the in-memory node
store and prints a summary.

Usage:
    python main.py <project_id>
    python main.py <project_id> --sdl
    KONTENT_PROJECT_ID=<project_id> python main.py --json
"""

import argparse
import asyncio
import json
import sys

import structlog

from kontent_source.config import get_settings
from kontent_source.core import KontentSourceError, configure_logging
from kontent_source.host import InMemoryNodeStore
from kontent_source.orchestration import source_nodes

logger = structlog.get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Project a Kontent content model into typed graph nodes"
    )
    parser.add_argument(
        "project_id",
        nargs="?",
        help="Kontent project id (defaults to KONTENT_PROJECT_ID)",
    )
    parser.add_argument(
        "--sdl",
        action="store_true",
        help="Print the generated GraphQL type declarations",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the run summary as JSON",
    )
    return parser.parse_args(argv)


async def run(args: argparse.Namespace) -> int:
    """Run one sourcing pass and print the requested output."""
    store = InMemoryNodeStore()

    try:
        result = await source_nodes(store, project_id=args.project_id)
    except KontentSourceError as e:
        logger.error("source_nodes_failed", error=str(e), error_type=type(e).__name__)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.sdl:
        print(result.registration.to_sdl())
    elif args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(f"Project: {result.project_id}")
        print(f"Object types: {len(result.registration.object_types)}")
        print(f"Nodes: {len(result.nodes)}")
        for type_name in sorted({node.type_name for node in result.nodes}):
            print(f"  {type_name}: {len(store.nodes_of_type(type_name))}")
    return 0


def main() -> None:
    """Main entry point."""
    settings = get_settings()
    configure_logging(settings.log_level)
    sys.exit(asyncio.run(run(parse_args())))


if __name__ == "__main__":
    main()
