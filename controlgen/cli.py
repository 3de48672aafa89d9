"""CLI entrypoint for controlgen."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import load_config
from .errors import ControlGenError
from .logging import configure_logging
from .pipeline import Pipeline

USAGE_MESSAGE = "Please pass a valid path. Usage: controlgen /path/to/winjs.d.ts"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="controlgen",
        description="Generate the sorted control catalog from a TypeScript declaration file.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a .controlgen.yml file (defaults to the declaration file's directory).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Path to the declaration file, for example winjs.d.ts.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for controlgen."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.path is None:
        print(USAGE_MESSAGE)
        return

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    declaration_path = Path(args.path).expanduser().resolve()
    config_path = args.config if args.config is not None else declaration_path.parent
    try:
        config = load_config(config_path)
        output = Pipeline(config=config).run(declaration_path)
    except FileNotFoundError as exc:
        parser.exit(1, f"{exc}\n")
    except ControlGenError as exc:
        parser.exit(1, f"controlgen failed: {exc}\n")
    print(output)


if __name__ == "__main__":
    main(sys.argv[1:])
