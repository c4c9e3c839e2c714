"""demo-api CLI: serve the API or print its route table.

Entry point registered as ``demo-api`` in ``pyproject.toml``::

    [project.scripts]
    demo-api = "demo_api.cli:main"
"""

import argparse
import logging
import sys

from demo_api.config import AppConfig
from demo_api.errors import ConfigurationError


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``demo-api`` command."""
    parser = argparse.ArgumentParser(
        prog="demo-api",
        description="Serve a small JSON API (health, users, sum).",
    )
    subparsers = parser.add_subparsers(dest="command")

    serve_parser = subparsers.add_parser("serve", help="Start the HTTP server")
    serve_parser.add_argument("--host", default=None, help="Bind host address (env HOST)")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port (env PORT)")

    subparsers.add_parser("routes", help="List registered routes")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        config = AppConfig.from_env()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    if args.command == "serve":
        from demo_api.cli._serve import run_serve

        configure_logging(config.log_level)
        run_serve(args, config)
    elif args.command == "routes":
        from demo_api.cli._routes import run_routes

        run_routes(config)


def configure_logging(level: str) -> None:
    """Send ``demo_api.*`` log records to stderr at *level*."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
