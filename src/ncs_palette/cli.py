from __future__ import annotations

import argparse
import logging
import sys

from .app import create_app
from .config import DEFAULT_SEED, ExplorerConfig
from .ncs import ParseError

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="ncs-palette",
        description="Browse NCS colors around a seed color in the browser.",
    )
    p.add_argument("--seed", default=DEFAULT_SEED, help="NCS notation, e.g. 1050-R90B")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=5000)
    p.add_argument("--radius", type=int, default=4, help="grid half-width in steps")
    p.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s: %(message)s")
    logging.getLogger().setLevel(args.log_level)

    try:
        config = ExplorerConfig(seed=args.seed, radius=args.radius)
        app = create_app(config)
    except ParseError as e:
        log.error("invalid seed color: %s", e)
        return 2
    except ValueError as e:
        log.error("%s", e)
        return 2

    # One explorer, one request at a time.
    app.run(host=args.host, port=args.port, debug=False, threaded=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
