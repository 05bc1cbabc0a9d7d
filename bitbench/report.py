"""
Report Generator
================

Turns chart data (the ``points`` list of a service response) into:
  - a summary table (tabulate)
  - a timestamped JSON file with host metadata (psutil)
  - a log-log timing chart (matplotlib)

Points are taken in their wire form, as produced by
``MeasurementPoint.to_dict()``.
"""

import json
import os
import sys
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import psutil
from tabulate import tabulate

from .core.orchestrator import recursion_timed
from .utils.helpers import format_ns, format_ratio

logger = logging.getLogger(__name__)


SUMMARY_HEADERS = ["n", "Steps (it)", "Steps (rec)", "Iterative", "Recursive", "Recursive vs iterative"]


def _recursion_measured(point: Dict[str, Any]) -> bool:
    return recursion_timed(point['n'], point['stepsRecursive'])


def summary_rows(points: List[Dict[str, Any]]) -> List[List[Any]]:
    rows = []
    for p in points:
        if _recursion_measured(p):
            rec = format_ns(p['timeRecursive'])
            ratio = format_ratio(p['timeRecursive'], p['timeIterative'])
        else:
            rec = "N/A"
            ratio = "N/A"
        rows.append([
            p['n'],
            p['stepsIterative'],
            p['stepsRecursive'] or "N/A",
            format_ns(p['timeIterative']),
            rec,
            ratio,
        ])
    return rows


def format_summary(points: List[Dict[str, Any]], tablefmt: str = "simple") -> str:
    """Format chart points as a table."""
    return tabulate(summary_rows(points), headers=SUMMARY_HEADERS, tablefmt=tablefmt)


def host_metadata() -> Dict[str, Any]:
    freq = psutil.cpu_freq()
    return {
        'python_version': sys.version,
        'platform': sys.platform,
        'cpu_count': psutil.cpu_count(logical=True),
        'cpu_freq_mhz': freq.current if freq else None,
        'memory_total_bytes': psutil.virtual_memory().total,
    }


def save_results(response: Dict[str, Any], output_dir: str = "reports") -> str:
    """Save a service response plus host metadata to a timestamped JSON file."""
    os.makedirs(output_dir, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    filename = os.path.join(output_dir, f"bitbench_results_{timestamp}.json")

    data = {
        'timestamp': timestamp,
        'host': host_metadata(),
        'response': response,
    }

    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, default=str)

    logger.info(f"Results saved to {filename}")
    return filename


def plot_chart(
    points: List[Dict[str, Any]],
    output_path: str,
    title: Optional[str] = None,
) -> str:
    """Plot per-call time against magnitude for both converters."""
    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    xs = [p['n'] for p in points]
    it_ys = [p['timeIterative'] for p in points]
    rec = [(p['n'], p['timeRecursive']) for p in points if _recursion_measured(p)]

    fig, ax = plt.subplots(figsize=(10, 6), dpi=150)
    ax.loglog(xs, it_ys, label="Iterative", marker="o", linewidth=2)
    if rec:
        ax.loglog([x for x, _ in rec], [y for _, y in rec], label="Recursive", marker="s", linewidth=2)
    ax.grid(True, which="both", ls="--", alpha=0.6)
    ax.set_xlabel("Input magnitude $n$ (log scale)")
    ax.set_ylabel("Time per call (ns, log scale)")
    ax.set_title(title or "Decimal to binary: iterative vs recursive")
    ax.legend()
    fig.tight_layout()
    fig.savefig(output_path)
    plt.close(fig)

    logger.info(f"Chart written to {output_path}")
    return output_path
