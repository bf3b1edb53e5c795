from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from .drives import volume_usage
from .logger import get_logger, setup_logging
from .models import FileRecord, ScanReport
from .scanner import scan
from .topn import DEFAULT_LIMIT
from .utils import format_bytes

log = get_logger(__name__)


def _non_negative(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"limit must be >= 0, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bigfinder",
        usage="%(prog)s [options] directory",
        description="Find the biggest files and directories under a directory.",
    )
    parser.add_argument("directory", help="root of the search; must be a directory")
    parser.add_argument("--limit", type=_non_negative, default=DEFAULT_LIMIT,
                        help="limit number of results to display (default: %(default)s)")
    parser.add_argument("--human", action="store_true",
                        help="print sizes as KB/MB/GB instead of bytes")
    parser.add_argument("--volume", action="store_true",
                        help="also print usage of the filesystem holding the directory")
    parser.add_argument("--progress", action="store_true",
                        help="report scan progress on stderr")
    parser.add_argument("--log-level", default=None,
                        help="log level (default: $LOG_LEVEL or WARNING)")
    return parser


def format_record(rec: FileRecord, human: bool = False) -> str:
    return f"size: {format_bytes(rec.size, human)} -> {rec.path}"


def print_report(report: ScanReport, human: bool = False, out=None) -> None:
    out = out or sys.stdout
    print(file=out)
    print("Big Dirs:", file=out)
    print("---------", file=out)
    for rec in report.top_dirs:
        print(format_record(rec, human), file=out)
    print("Big Files:", file=out)
    print("----------", file=out)
    for rec in report.top_files:
        print(format_record(rec, human), file=out)
    print(f"Scanned {report.files} files, {report.dirs} dirs in {report.elapsed_sec:.2f}s "
          f"({report.skipped} skipped)", file=out)


def print_volume(path: str, out=None) -> None:
    out = out or sys.stdout
    u = volume_usage(path)
    print(f"Volume: {format_bytes(u['used'])} used of {format_bytes(u['total'])} "
          f"({u['percent']:.1f}%), {format_bytes(u['free'])} free", file=out)


def _print_progress(cur: str, files: int, dirs: int) -> None:
    print(f"[{files} files, {dirs} dirs] {cur}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        report = scan(args.directory, args.limit,
                      progress=_print_progress if args.progress else None)
    except NotADirectoryError as e:
        print(f"bigfinder: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"bigfinder: failure in {args.directory}: {e}", file=sys.stderr)
        return 1

    print_report(report, human=args.human)
    if args.volume:
        try:
            print_volume(report.root.path)
        except OSError as e:
            log.warning("volume usage unavailable", path=report.root.path, error=str(e))
    return 0


if __name__ == "__main__":
    sys.exit(main())
