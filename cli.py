"""
Command line interface for EcoFit.

Examples
--------
Show the configuration reference::

    python cli.py describe-config --section audit

List the registered fitness shapes and blend strategies::

    python cli.py list-shapes
    python cli.py list-blends
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from ecofit import EcoFit
from ecofit.exceptions import EcoFitError
from ecofit.diagnostics.doctor import run_doctor
from ecofit.genetics.blend import list_blends
from ecofit.genetics.fitness import list_shapes


def _doctor_command(_: argparse.Namespace) -> int:
    results = run_doctor()
    for item in results:
        status = item.get("status", "unknown").upper()
        print(f"[{status}] {item.get('check', '')}")
        details = item.get("details")
        if details:
            print(f"  {details}")
    return 1 if any(item.get("status") == "fail" for item in results) else 0


def _describe_config_command(args: argparse.Namespace) -> int:
    if args.key:
        print(EcoFit.explain(args.key))
        return 0
    EcoFit.describe_config(section=args.section, as_markdown=args.markdown, to_console=True)
    return 0


def _generate_config_docs_command(args: argparse.Namespace) -> int:
    path = EcoFit.generate_config_docs(Path(args.output))
    print(f"Configuration reference generated at {path.resolve()}")
    return 0


def _list_shapes_command(_: argparse.Namespace) -> int:
    for name, shape in sorted(list_shapes().items()):
        doc = (getattr(shape.function, "__doc__", None) or "").strip().splitlines()
        print(f"{name}: {doc[0]}" if doc else name)
    return 0


def _list_blends_command(_: argparse.Namespace) -> int:
    for name, blend in sorted(list_blends().items()):
        doc = (blend.__doc__ or "").strip().splitlines()
        print(f"{name}: {doc[0]}" if doc else name)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ecofit", description="EcoFit fitness model CLI")
    subparsers = parser.add_subparsers(dest="command")

    doctor_parser = subparsers.add_parser("doctor", help="Run environment diagnostics.")
    doctor_parser.set_defaults(func=_doctor_command)

    describe_parser = subparsers.add_parser("describe-config", help="Display EcoFit configuration schema.")
    describe_parser.add_argument("--section", help="Optional configuration section to filter.")
    describe_parser.add_argument("--markdown", action="store_true", help="Render the output as markdown.")
    describe_parser.add_argument("--key", help="Explain a single configuration key instead of listing the table.")
    describe_parser.set_defaults(func=_describe_config_command)

    config_doc_parser = subparsers.add_parser("generate-config-docs", help="Write CONFIG.md from the schema.")
    config_doc_parser.add_argument("--output", default="CONFIG.md", help="Destination markdown file (default: CONFIG.md).")
    config_doc_parser.set_defaults(func=_generate_config_docs_command)

    shapes_parser = subparsers.add_parser("list-shapes", help="List registered fitness function shapes.")
    shapes_parser.set_defaults(func=_list_shapes_command)

    blends_parser = subparsers.add_parser("list-blends", help="List registered blend strategies.")
    blends_parser.set_defaults(func=_list_blends_command)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    parsed = parser.parse_args(list(sys.argv[1:] if argv is None else argv))
    if not hasattr(parsed, "func"):
        parser.print_help()
        return 0
    try:
        return parsed.func(parsed)
    except EcoFitError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
