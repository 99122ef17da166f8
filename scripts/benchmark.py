#!/usr/bin/env python3
"""Benchmark script for selectorkit performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path


def benchmark_import_time() -> float:
    """Measure import time of selectorkit package."""
    start = time.perf_counter()
    import selectorkit  # noqa: F401

    return time.perf_counter() - start


def benchmark_compound_selectors(iterations: int) -> float:
    """Measure building full compound selectors."""
    from selectorkit import css_selector_builder as css

    start = time.perf_counter()
    for _ in range(iterations):
        css.element("a").id("nav").class_("link").attr("href").pseudo_class("hover").pseudo_element(
            "after"
        ).stringify()
    return time.perf_counter() - start


def benchmark_combine(iterations: int) -> float:
    """Measure nested combine of prebuilt selectors."""
    from selectorkit import css_selector_builder as css

    left = css.element("div").id("main")
    middle = css.element("table").id("data")
    right = css.element("td").pseudo_class("nth-of-type(even)")

    start = time.perf_counter()
    for _ in range(iterations):
        css.combine(left, "+", css.combine(middle, "~", right)).stringify()
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run selectorkit benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=10000,
        help="Iterations per benchmark",
    )
    args = parser.parse_args()

    results = [
        {
            "name": "Import Time",
            "unit": "seconds",
            "value": benchmark_import_time(),
        },
        {
            "name": f"Compound Selectors ({args.iterations} iterations)",
            "unit": "seconds",
            "value": benchmark_compound_selectors(args.iterations),
        },
        {
            "name": f"Nested Combine ({args.iterations} iterations)",
            "unit": "seconds",
            "value": benchmark_combine(args.iterations),
        },
    ]

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
