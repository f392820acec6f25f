"""Unified CLI entrypoint.

Sub-commands:
  1) list    (catalog keys and display names)
  2) show    (resolve a preset and print its summary)
  3) export  (resolve a preset and write the simulator parameters)
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from sstdr_twin.catalog import ConfigurationCatalog
from sstdr_twin.errors import SstdrConfigError
from sstdr_twin.presets_io import load_catalog
from sstdr_twin.resolver import export_parameters, resolve
from sstdr_twin.summary import format_summary
from sstdr_twin.utils.logging import get_logger
from sstdr_twin.workspace import save_exported_csv, save_exported_json


def _catalog(args: argparse.Namespace) -> ConfigurationCatalog:
    return load_catalog([Path(p) for p in (args.presets or [])])


def _cmd_list(args: argparse.Namespace) -> None:
    catalog = _catalog(args)
    for preset in catalog.presets():
        print(f"{preset.key:<14} {preset.name}")


def _cmd_show(args: argparse.Namespace) -> None:
    resolved = resolve(args.name, catalog=_catalog(args))
    print(format_summary(resolved))


def _cmd_export(args: argparse.Namespace) -> None:
    resolved = resolve(args.name, catalog=_catalog(args))
    exported = export_parameters(resolved)
    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    if args.format == "csv":
        save_exported_csv(out, exported)
    else:
        save_exported_json(out, exported)
    print(f"Saved simulator parameters to {out}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sstdr-twin", description="SSTDR configuration runner")
    parser.add_argument(
        "--presets",
        action="append",
        help="Path to a JSON preset file added to the catalog (repeatable)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    lst = sub.add_parser("list", help="List available configurations")
    lst.set_defaults(func=_cmd_list)

    show = sub.add_parser("show", help="Resolve a configuration and print its summary")
    show.add_argument("name", nargs="?", default="default", help="Configuration name (default: default)")
    show.set_defaults(func=_cmd_show)

    export = sub.add_parser("export", help="Resolve a configuration and write simulator parameters")
    export.add_argument("name", nargs="?", default="default", help="Configuration name (default: default)")
    export.add_argument("--out", type=str, required=True, help="Output file path")
    export.add_argument("--format", choices=("json", "csv"), default="json", help="Output format")
    export.set_defaults(func=_cmd_export)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    get_logger(level=logging.DEBUG if args.verbose else logging.INFO)
    try:
        args.func(args)
    except SstdrConfigError as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
