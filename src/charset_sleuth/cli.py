"""Command-line interface for charset_sleuth."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import charset_sleuth
from charset_sleuth.config import DEFAULT_CHAOS_THRESHOLD, DetectionConfig
from charset_sleuth.enums import EncodingEra
from charset_sleuth.matches import CharsetMatch, CharsetMatches

_ERA_NAMES = [e.name.lower() for e in EncodingEra if e.bit_count() == 1] + ["all"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="charset-sleuth",
        description="Guess the character encoding of files.",
    )
    parser.add_argument("files", nargs="*", help="Files to inspect; stdin when omitted")
    parser.add_argument(
        "--minimal", action="store_true", help="Output only the encoding name"
    )
    parser.add_argument(
        "-a",
        "--with-alternative",
        action="store_true",
        help="Also list the alternative encodings",
    )
    parser.add_argument("--json", action="store_true", help="Output a JSON report")
    parser.add_argument(
        "-t",
        "--threshold",
        type=float,
        default=DEFAULT_CHAOS_THRESHOLD,
        help="Maximum accepted chaos, between 0 and 1",
    )
    parser.add_argument(
        "-i",
        "--include",
        action="append",
        default=[],
        metavar="ENCODING",
        help="Only try this encoding (repeatable)",
    )
    parser.add_argument(
        "-x",
        "--exclude",
        action="append",
        default=[],
        metavar="ENCODING",
        help="Never try this encoding (repeatable)",
    )
    parser.add_argument("-l", "--language", default=None, help="Language to score against")
    parser.add_argument("-p", "--preferred", default=None, help="Encoding to favour in ties")
    parser.add_argument(
        "-e",
        "--encoding-era",
        default="all",
        choices=_ERA_NAMES,
        help="Encoding era filter",
    )
    parser.add_argument(
        "--no-preemptive",
        action="store_true",
        help="Ignore encodings declared inside the content",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log the detection process to stderr"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"charset-sleuth {charset_sleuth.__version__}",
    )
    return parser


def _describe(name: str, match: CharsetMatch) -> str:
    return (
        f"{name}: {match.encoding} ({match.language}) "
        f"chaos={match.chaos:.3f} coherence={match.coherence:.1f}"
    )


def _report(name: str, results: CharsetMatches, args: argparse.Namespace) -> list[dict]:
    best = results.best()
    if args.json:
        shown = list(results) if args.with_alternative else list(results)[:1]
        return [{"path": name, **match.to_dict()} for match in shown]
    if best is None:
        print(f"{name}: no result")
    elif args.minimal:
        print(best.encoding)
    else:
        print(_describe(name, best))
    if args.with_alternative and not args.minimal:
        for match in list(results)[1:]:
            print(f"  {_describe('alternative', match)}")
    return []


def main(argv: list[str] | None = None) -> int:
    """Run the ``charset-sleuth`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    :returns: 0 on success, 1 if any input could not be analyzed.
    """
    args = _build_parser().parse_args(argv)

    era = EncodingEra.ALL if args.encoding_era == "all" else EncodingEra[args.encoding_era.upper()]
    try:
        config = DetectionConfig(
            chaos_threshold=args.threshold,
            preferred_encoding=args.preferred,
            excluded_encodings=frozenset(args.exclude),
            include_encodings=frozenset(args.include),
            language_hint=args.language,
            preemptive=not args.no_preemptive,
            encoding_era=era,
            explain=args.verbose,
        )
    except ValueError as e:
        print(f"charset-sleuth: {e}", file=sys.stderr)
        return 2

    inputs: list[tuple[str, Path | None]] = [(f, Path(f)) for f in args.files] or [
        ("stdin", None)
    ]
    status = 0
    report: list[dict] = []
    for name, path in inputs:
        try:
            if path is None:
                results = charset_sleuth.detect(sys.stdin.buffer.read(), config)
            else:
                results = charset_sleuth.detect_file(path, config)
        except (OSError, ValueError) as e:
            print(f"charset-sleuth: {name}: {e}", file=sys.stderr)
            status = 1
            continue
        report.extend(_report(name, results, args))

    if args.json:
        print(json.dumps(report, ensure_ascii=False, indent=2))
    return status


if __name__ == "__main__":
    sys.exit(main())
