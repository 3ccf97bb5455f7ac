"""Command-line entry point: analyze a page and save the JSON report."""

import argparse
import sys
import time

from deps import Optional, Path, json

from js_compat_checker.errors import CompatCheckerError
from js_compat_checker.issue import NothingToAnalyze

from .config import get_analysis_config
from .report_formatter import format_console_report
from .services import CheckerService
from .startup import configure_logging

EXAMPLES = """
Examples:
  js-compat-analyze https://example.com
  js-compat-analyze https://example.com "last 2 Chrome versions" "IE 11"
  js-compat-analyze https://example.com "last 1 version" "> 1%"
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="js-compat-analyze",
        description="Download a web page and analyze its JavaScript for browser compatibility.",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("url", help="Page URL (http or https)")
    parser.add_argument("targets", nargs="*", help="Browserslist queries (default: configured baseline)")
    parser.add_argument(
        "--polyfill", action="append", dest="polyfills", metavar="NAME",
        help="Feature the page polyfills (repeatable; replaces the default list)",
    )
    parser.add_argument("--output", "-o", type=Path, help="Report path (default: compatibility-report-<ms>.json)")
    parser.add_argument("--max-workers", type=int, help="Concurrent lint engine invocations")
    parser.add_argument("--log-level", default="", help="Logging level (default: LOG_LEVEL or INFO)")
    return parser


def main(argv: Optional[list] = None, service: Optional[CheckerService] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level.upper())

    print("🚀 JavaScript Compatibility Analyzer")
    print("=====================================")

    service = service or CheckerService()
    try:
        config = get_analysis_config().with_overrides(args.targets, args.polyfills, args.max_workers)
        outcome = service.analyze_page(args.url, config)
    except (CompatCheckerError, ValueError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    if isinstance(outcome.result, NothingToAnalyze):
        print(outcome.result.message)
        return 0

    report = dict(url=outcome.url, **outcome.result.to_dict())
    for line in format_console_report(outcome.url, report):
        print(line)

    report_path = args.output or Path(f"compatibility-report-{int(time.time() * 1000)}.json")
    try:
        report_path.write_text(json.dumps(report, indent=2, ensure_ascii=False), encoding="utf-8")
    except OSError as e:
        print(f"❌ Error: could not write report to {report_path}: {e}", file=sys.stderr)
        return 1
    print(f"\n📄 Detailed report saved to: {report_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
