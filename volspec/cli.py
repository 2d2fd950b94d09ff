from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from volspec.core.errors import SpecValidationError
from volspec.core.settings import load_settings
from volspec.core.spec import SpecHandler
from volspec.core.spec.options_loader import load_options_file

log = logging.getLogger("volspec.cli")


def _parse_opt_args(pairs: List[str]) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise SystemExit(f"ERROR: --opt expects key=value, got {pair!r}")
        out[key] = value
    return out


def _emit(payload: dict) -> None:
    print(json.dumps(payload, indent=2, sort_keys=True))


def _cmd_decode(handler: SpecHandler, args: argparse.Namespace) -> int:
    result = handler.spec_from_string(args.text)
    _emit(
        {
            "ok": result.ok,
            "name": result.name,
            "spec": result.spec.model_dump(mode="json"),
            "source": result.source.model_dump(mode="json") if result.source else None,
        }
    )
    return 0 if result.ok else 1


def _cmd_normalize(handler: SpecHandler, args: argparse.Namespace) -> int:
    opts: Dict[str, str] = {}
    if args.file:
        opts.update(load_options_file(Path(args.file)))
    # --opt wins over the file
    opts.update(_parse_opt_args(args.opt or []))

    try:
        report = handler.report_from_opts(opts)
    except SpecValidationError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    _emit(
        {
            "spec": report.spec.model_dump(mode="json"),
            "source": report.source.model_dump(mode="json") if report.source else None,
            "outcomes": [o.to_dict() for o in report.outcomes],
        }
    )
    return 0


def _cmd_defaults(handler: SpecHandler, args: argparse.Namespace) -> int:
    _emit({"spec": handler.default_spec().model_dump(mode="json")})
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="volspec", description="Normalize volume creation options")
    ap.add_argument("--strict", action="store_true", help="Reject every invalid option value")
    sub = ap.add_subparsers(dest="command", required=True)

    p_decode = sub.add_parser("decode", help="Decode a 'key=value;...;name=vol' string")
    p_decode.add_argument("text")
    p_decode.set_defaults(func=_cmd_decode)

    p_norm = sub.add_parser("normalize", help="Normalize an option mapping")
    p_norm.add_argument("--opt", action="append", metavar="KEY=VALUE", help="Option (repeatable)")
    p_norm.add_argument("--file", help="JSON or YAML file with a flat option mapping")
    p_norm.set_defaults(func=_cmd_normalize)

    p_def = sub.add_parser("defaults", help="Print the default volume spec")
    p_def.set_defaults(func=_cmd_defaults)
    return ap


def _log_level(name: str) -> int:
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings()
    logging.basicConfig(level=_log_level(settings.log_level))

    args = build_parser().parse_args(argv)
    handler = SpecHandler(strict=args.strict or settings.strict)
    log.debug("Running %s (env=%s, strict=%s)", args.command, settings.env, handler.strict)
    return args.func(handler, args)


if __name__ == "__main__":
    raise SystemExit(main())
