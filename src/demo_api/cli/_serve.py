"""``demo-api serve``: build the app and run it under uvicorn."""

import argparse
import dataclasses
import sys

from demo_api.config import AppConfig
from demo_api.errors import ConfigurationError
from demo_api.service import create_app


def run_serve(args: argparse.Namespace, config: AppConfig) -> None:
    """Start the server. ``--host``/``--port`` override the environment."""
    overrides: dict[str, object] = {}
    if args.host:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port

    try:
        config = dataclasses.replace(config, **overrides)  # type: ignore[arg-type]
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    create_app(config).run()
