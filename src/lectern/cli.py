"""Command line entry point."""

import argparse
import logging
from pathlib import Path

import uvicorn

from lectern.config import settings
from lectern.main import create_app


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lectern",
        description="Serve a directory of markdown files as a website.",
    )
    parser.add_argument("--content", type=Path, help="content directory to serve")
    parser.add_argument("--host", help="interface to bind")
    parser.add_argument("--port", type=int, help="port to listen on")
    parser.add_argument("--log-level", help="logging level, e.g. DEBUG")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    overrides = {
        "content_dir": args.content,
        "host": args.host,
        "port": args.port,
        "log_level": args.log_level,
    }
    app_settings = settings.model_copy(
        update={k: v for k, v in overrides.items() if v is not None}
    )

    logging.basicConfig(
        level=app_settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info("Serving %s", app_settings.root)

    uvicorn.run(
        create_app(app_settings),
        host=app_settings.host,
        port=app_settings.port,
        log_level=app_settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
