#!/usr/bin/env python3
"""
Parser performance benchmarks.

Measures classification cost for best, worst and fallback cases.
"""

import time
from typing import Any

from identity_error_parser.parser import IdentityErrorParser


def _bench(name: str, parser: IdentityErrorParser, status: int, body: str,
           iterations: int) -> dict[str, Any]:
    start = time.perf_counter()
    for _ in range(iterations):
        parser.find_any_error(status, lambda: body)
    elapsed = time.perf_counter() - start

    return {
        "name": name,
        "iterations": iterations,
        "elapsed_seconds": elapsed,
        "throughput_ops": iterations / elapsed,
        "latency_us": (elapsed / iterations) * 1_000_000,
    }


def run_benchmarks(iterations: int = 20000) -> list[dict[str, Any]]:
    """Run all benchmarks."""
    parser = IdentityErrorParser()
    long_body = "x" * 4096 + " User_Already_Binded"
    return [
        _bench("First ids rule", parser, 400, "invalid_grant: Invalid code", iterations),
        _bench("Last api rule", parser, 409, "User_Already_Binded", iterations),
        _bench("No match", parser, 500, "Database connection refused", iterations),
        _bench("No match, 4 KiB body", parser, 500, "x" * 4096, iterations),
        _bench("Last api rule, 4 KiB body", parser, 409, long_body, iterations),
    ]


def print_results(results: list[dict[str, Any]]) -> None:
    """Print benchmark results."""
    print("=" * 70)
    print("Identity Error Parser Benchmarks")
    print("=" * 70)
    print()
    print(f"{'Benchmark':<32} {'Throughput':>15} {'Latency':>15}")
    print("-" * 70)
    for r in results:
        print(f"{r['name']:<32} {r['throughput_ops']:>12,.0f}/s {r['latency_us']:>12.2f}us")
    print()


if __name__ == "__main__":
    print_results(run_benchmarks())
