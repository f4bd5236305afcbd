"""linkscope CLI - classify URLs from the command line."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Dict, Iterable, List, Optional, Sequence

from .analyzer import analyze
from .batching import get_batch_stats, group_by_category, group_by_media_type, group_by_platform
from .categories import category_for
from .config import get_settings
from .detector import detect_platform
from .logging import configure_logging, get_logger


logger = get_logger(__name__)

GROUPERS = {
    "platform": group_by_platform,
    "category": group_by_category,
    "media": group_by_media_type,
}


def read_urls(lines: Iterable[str]) -> List[str]:
    """Collect URLs from lines of text, skipping blanks and ``#`` comments."""
    urls = []
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        urls.append(stripped)
    return urls


def _dump(payload) -> str:
    return json.dumps(payload, indent=get_settings().output_indent, ensure_ascii=False)


def _read_input(handle) -> List[str]:
    if handle is sys.stdin:
        return read_urls(handle)
    with handle:
        return read_urls(handle)


def cmd_analyze(args) -> int:
    """Print the full analysis of each URL."""
    for url in args.urls:
        print(_dump(analyze(url).to_dict()))
    return 0


def cmd_platform(args) -> int:
    """Print platform and category for each URL."""
    for url in args.urls:
        platform = detect_platform(url)
        print(f"{url}\t{platform.value}\t{category_for(platform).value}")
    return 0


def cmd_group(args) -> int:
    """Group URLs read from a file."""
    urls = _read_input(args.file)
    groups = GROUPERS[args.by](urls)
    payload: Dict[str, List[str]] = {key.value: members for key, members in groups.items()}
    logger.info("Grouped URLs", by=args.by, urls=len(urls), groups=len(payload))
    print(_dump(payload))
    return 0


def cmd_stats(args) -> int:
    """Print batch statistics for URLs read from a file."""
    urls = _read_input(args.file)
    print(_dump(get_batch_stats(urls)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linkscope",
        description="linkscope - URL validation and platform classification",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s analyze https://youtu.be/dQw4w9WgXcQ     Full analysis as JSON
  %(prog)s platform github.com/apple/swift           Platform and category
  %(prog)s group --by category urls.txt              Group URLs from a file
  cat urls.txt | %(prog)s stats -                    Statistics from stdin
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # analyze
    analyze_parser = subparsers.add_parser("analyze", help="Analyze URLs")
    analyze_parser.add_argument("urls", nargs="+", metavar="URL", help="URLs to analyze")
    analyze_parser.set_defaults(func=cmd_analyze)

    # platform
    platform_parser = subparsers.add_parser("platform", help="Detect platforms")
    platform_parser.add_argument("urls", nargs="+", metavar="URL", help="URLs to classify")
    platform_parser.set_defaults(func=cmd_platform)

    # group
    group_parser = subparsers.add_parser("group", help="Group URLs from a file")
    group_parser.add_argument(
        "--by", "-b", choices=sorted(GROUPERS), default="platform", help="Grouping key"
    )
    group_parser.add_argument(
        "file", type=argparse.FileType("r"), help="File with one URL per line, or - for stdin"
    )
    group_parser.set_defaults(func=cmd_group)

    # stats
    stats_parser = subparsers.add_parser("stats", help="Summarize URLs from a file")
    stats_parser.add_argument(
        "file", type=argparse.FileType("r"), help="File with one URL per line, or - for stdin"
    )
    stats_parser.set_defaults(func=cmd_stats)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    configure_logging()
    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
