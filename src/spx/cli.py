"""spx command line interface."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from rich.console import Console

from .commands import empty_message, load_tree, next_command
from .config import SpxSettings, get_settings, load_project_settings
from .errors import SpxError
from .reporter import OUTPUT_FORMATS, format_tree, render_text
from .server import configure_logging


def load_settings(args: argparse.Namespace) -> SpxSettings:
    settings = load_project_settings(args.cwd, get_settings())
    configure_logging(settings.log_level)
    return settings


def cmd_status(args: argparse.Namespace) -> None:
    settings = load_settings(args)
    output_format = "json" if args.json else args.format

    tree = asyncio.run(load_tree(args.cwd, settings, validate=args.validate))
    if tree is None:
        print(empty_message(settings))
        return
    if output_format == "text":
        Console().print(render_text(tree), soft_wrap=True)
        return
    print(format_tree(tree, output_format, settings))


def cmd_next(args: argparse.Namespace) -> None:
    settings = load_settings(args)
    print(asyncio.run(next_command(args.cwd, settings)))


def cmd_serve(args: argparse.Namespace) -> None:
    from .server import main as serve

    serve()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="spx", description="Spec workflow status for work item trees")
    sub = parser.add_subparsers(dest="cmd")

    def _add_cwd(command: argparse.ArgumentParser) -> None:
        command.add_argument(
            "--cwd",
            type=Path,
            default=Path.cwd(),
            help="Project directory (defaults to the current directory)",
        )

    p_status = sub.add_parser("status", help="Show the status of every work item")
    p_status.add_argument("--json", action="store_true", help="Output JSON (overrides --format)")
    p_status.add_argument("--format", choices=OUTPUT_FORMATS, default="text", help="Output format")
    p_status.add_argument(
        "--validate",
        action="store_true",
        help="Check hierarchy, ordering and cycle invariants before rendering",
    )
    _add_cwd(p_status)
    p_status.set_defaults(func=cmd_status)

    p_next = sub.add_parser("next", help="Show the next story to work on")
    _add_cwd(p_next)
    p_next.set_defaults(func=cmd_next)

    p_serve = sub.add_parser("serve", help="Run the spx MCP server")
    p_serve.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 0
    try:
        args.func(args)
    except SpxError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
