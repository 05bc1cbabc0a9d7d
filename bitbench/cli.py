"""
bitbench command line
=====================

Usage:
    python -m bitbench 37
    python -m bitbench 2000000 --mode recursive --plot reports/chart.png
    python -m bitbench 500000 --budget 5 --save reports
"""

import argparse
import logging
import sys
from typing import List, Optional

from .report import format_summary, plot_chart, save_results
from .service import BenchmarkService, Mode
from .utils.helpers import format_ns


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bitbench",
        description="Compare iterative and recursive decimal-to-binary conversion.",
    )
    parser.add_argument("n", help="magnitude to convert (clamped to [0, 1e9])")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in Mode],
        default=Mode.BOTH.value,
        help="which single conversions to run (default: both)",
    )
    parser.add_argument("--plot", metavar="FILE", help="write a timing chart image")
    parser.add_argument("--save", metavar="DIR", help="write the response as JSON into DIR")
    parser.add_argument(
        "--budget",
        type=float,
        metavar="SECONDS",
        help="wall-clock budget for chart generation",
    )
    parser.add_argument(
        "--warmup",
        type=int,
        default=BenchmarkService.WARMUP_CALLS,
        help="untimed calls before each measurement",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    service = BenchmarkService(warmup_calls=args.warmup, chart_budget_s=args.budget)
    response = service.run(args.n, args.mode)

    if 'error' in response:
        print(f"error: {response['error']}", file=sys.stderr)
        return 2

    print(f"n = {response['n']}")
    for key in ('iterative', 'recursive'):
        if key not in response:
            continue
        single = response[key]
        print(
            f"  {key:<10} binary={single['binary']} steps={single['steps']} "
            f"time={format_ns(single['time'])}"
        )
        if 'warning' in single:
            print(f"  {'':<10} warning: {single['warning']}")

    chart = response['chart']
    print()
    print(format_summary(chart['points']))
    if chart.get('truncated'):
        print(f"\nChart truncated to {len(chart['sizes'])} points by the time budget.")

    if args.save:
        print(f"\nResults saved to {save_results(response, args.save)}")
    if args.plot:
        print(f"Chart written to {plot_chart(chart['points'], args.plot)}")

    return 0
