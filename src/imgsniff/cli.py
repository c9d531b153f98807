from __future__ import annotations
import argparse, json, logging

from .config import config
from .errors import DimensionError
from .models.image import ImageReport

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _emit(obj: dict, indent: int | None) -> None:
    print(json.dumps(obj, indent=indent))


def cmd_info(args) -> int:
    indent = config.JSON_INDENT or None
    failures = 0
    for path in args.input:
        try:
            report = ImageReport.from_path(path, media_type=args.type)
        except DimensionError as e:
            failures += 1
            logger.warning("%s: %s", path, e)
            _emit({"filename": path, "error": str(e), "kind": e.kind.value}, indent)
            continue
        except OSError as e:
            failures += 1
            logger.warning("%s: cannot read file: %s", path, e)
            _emit({"filename": path, "error": str(e), "kind": "io_error"}, indent)
            continue
        _emit(report.model_dump(mode="json"), indent)
    return 1 if failures else 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="imgsniff", description="Read image dimensions from header bytes")
    p.add_argument("--log-level", default=None, type=str.upper, choices=LOG_LEVELS,
                   help="Override IMGSNIFF_LOG_LEVEL")
    sub = p.add_subparsers(dest="cmd")

    sp = sub.add_parser("info", help="print {filename, media_type, dimensions} as JSON per file")
    sp.add_argument("input", nargs="+", help="Image file(s)")
    sp.add_argument("--type", default=None,
                    help="Declared media type (e.g. image/png); default: guess from the file extension")
    sp.set_defaults(func=cmd_info)

    return p


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    ns = p.parse_args(argv)

    level = ns.log_level or config.LOG_LEVEL.upper()
    if level not in LOG_LEVELS:
        p.error(f"invalid IMGSNIFF_LOG_LEVEL {config.LOG_LEVEL!r} (choose from {', '.join(LOG_LEVELS)})")
    logging.basicConfig(level=level, format=config.LOG_FORMAT)

    if not hasattr(ns, "func"):
        p.print_help()
        return 2
    return ns.func(ns)


if __name__ == "__main__":
    raise SystemExit(main())
