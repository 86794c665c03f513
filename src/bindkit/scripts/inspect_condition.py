"""CLI helper to preview how a condition resolves for sample values."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from ..converters.kinds import ConverterKind
from ..core.coercion import build_default_registry
from ..core.errors import BindingError
from ..core.types import TypeResolver
from ..resolver import KindResolver, ResolutionRequest
from ..services.settings import SettingsStore
from ..utils.logging import level_from_settings, setup_logging


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Resolve a condition converter and evaluate it for sample values.")
    parser.add_argument("--type", dest="type_name", help="Declared type name, e.g. int32, string or pkg.mod:Name.")
    parser.add_argument("--if-true", dest="if_true", help="Raw value used when the condition holds.")
    parser.add_argument("--if-false", dest="if_false", help="Raw value used when the condition does not hold.")
    parser.add_argument(
        "--kind",
        default=ConverterKind.BOOLEAN.value,
        choices=[kind.value for kind in ConverterKind],
        help="Converter shape to build.",
    )
    parser.add_argument("--operator", default="==", help="Comparison operator for --kind comparison.")
    parser.add_argument("--reference", help="Reference value for --kind comparison.")
    parser.add_argument(
        "--values",
        nargs="*",
        default=(),
        help="Allowed values for --kind membership.",
    )
    parser.add_argument(
        "--value",
        dest="inputs",
        action="append",
        default=[],
        help="Live value to evaluate; may be repeated. 'none' means no value.",
    )
    parser.add_argument("--settings", type=Path, help="Optional settings file to load.")
    parser.add_argument("--log-dir", type=Path, help="Directory for bindkit.log; enables file logging.")
    parser.add_argument("--verbose", action="store_true", help="Log resolution details at DEBUG level.")
    args = parser.parse_args(argv)

    settings = SettingsStore(args.settings).load()
    if args.log_dir or args.verbose or settings.debug_logging:
        level = logging.DEBUG if args.verbose else level_from_settings(settings)
        setup_logging(level, log_dir=args.log_dir, console=args.verbose, force=True)
    kind = ConverterKind.parse(args.kind)
    try:
        declared_type = TypeResolver(settings.type_aliases).resolve(args.type_name) if args.type_name else None
        resolver = KindResolver(kind, build_default_registry(settings), **_kind_options(kind, args))
        converter = resolver.resolve(ResolutionRequest(declared_type, args.if_true, args.if_false))
    except (BindingError, ValueError) as exc:
        print(str(exc), file=sys.stderr)
        return 1

    print(f"kind: {kind.value}")
    print(f"result type: {converter.result_type.__name__}")
    print(f"if true: {converter.if_true!r}")
    print(f"if false: {converter.if_false!r}")
    for raw in args.inputs:
        value = _parse_input(raw)
        print(f"{raw} -> {converter.convert(value)!r}")
    return 0


def _kind_options(kind: ConverterKind, args: argparse.Namespace) -> dict[str, Any]:
    if kind is ConverterKind.COMPARISON:
        return {"operator": args.operator, "reference": _parse_input(args.reference)}
    if kind is ConverterKind.MEMBERSHIP:
        return {"values": [_parse_input(item) for item in args.values]}
    return {}


def _parse_input(raw: str | None) -> Any:
    if raw is None:
        return None
    text = raw.strip()
    lowered = text.lower()
    if lowered in ("none", "null", ""):
        return None
    if lowered in ("true", "false"):
        return lowered == "true"
    for cast in (int, float):
        try:
            return cast(text)
        except ValueError:
            continue
    return raw


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
