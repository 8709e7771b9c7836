from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from indexai.domain.entries import display_name


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="index-ai",
        description="Sort the top-level items of a folder into category subfolders.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Folder to organize (default: current directory).",
    )
    parser.add_argument(
        "--ai",
        action="store_true",
        help="Let the Gemini model plan the moves (limited to a small number of items).",
    )
    parser.add_argument("--api-key", default=None, help="Gemini API key (overrides GEMINI_API_KEY).")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details.")
    return parser.parse_args(argv)


def _resolve_log_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def main(argv: list[str] | None = None) -> int:
    load_dotenv(Path.cwd() / ".env", override=False)
    args = _parse_args(argv)

    from indexai.container import build_services
    from indexai.settings import LOG_LEVEL

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else _resolve_log_level(LOG_LEVEL),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    target = Path(args.path) if args.path else Path(os.getcwd())
    services = build_services(api_key=args.api_key)
    result = services["organize_service"].run(
        target,
        use_ai=args.ai,
        progress_callback=lambda message: print(f"> {display_name(message)}", flush=True),
    )
    print(display_name(result.message))
    return 0 if result.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
