#!/usr/bin/env python3
"""Benchmark script for phpcompat scanning throughput.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path

from phpcompat.application.services.scanner import CompatibilityScanner
from phpcompat.application.sniffs import analyze_parameter_order
from phpcompat.domain.model.configuration import ScanConfig
from phpcompat.domain.model.location import Location
from phpcompat.domain.model.parameter import ParameterDescriptor
from phpcompat.domain.model.signature import FunctionSignature
from phpcompat.domain.model.token import Token

_FILE = Path("bench.php")


def _signature(index: int, width: int) -> FunctionSignature:
    """Signature alternating optional and required parameters."""
    params = []
    for i in range(width):
        location = Location(file=_FILE, line=index + 1, column=i * 10 + 1)
        if i % 2:
            params.append(ParameterDescriptor(name=f"$p{i}", location=location))
        else:
            params.append(
                ParameterDescriptor(
                    name=f"$p{i}",
                    location=location,
                    default=(Token.null(),),
                    type_hint="int",
                    nullable_type=i % 4 == 0,
                )
            )
    return FunctionSignature(
        name=f"f{index}", location=Location(file=_FILE, line=index + 1), parameters=tuple(params)
    )


def benchmark_analyzer(width: int) -> float:
    """Measure analyze_parameter_order on one wide signature."""
    params = _signature(0, width).parameters

    start = time.perf_counter()
    for _ in range(10000):
        analyze_parameter_order(params, target_at_least_80=True, target_at_least_81=True)
    return time.perf_counter() - start


def benchmark_scan(count: int, workers: int) -> float:
    """Measure a full scan of count signatures."""
    signatures = [_signature(i, 8) for i in range(count)]
    scanner = CompatibilityScanner.from_config(ScanConfig(max_workers=workers))

    start = time.perf_counter()
    scanner.scan(signatures)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run phpcompat benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    parser.add_argument("--signatures", type=int, default=10000, help="Signatures per scan")
    parser.add_argument("--workers", type=int, default=4, help="Threads for the parallel scan")
    args = parser.parse_args()

    results = [
        {
            "name": "Analyzer, 16 parameters (10k iterations)",
            "unit": "seconds",
            "value": benchmark_analyzer(16),
        },
        {
            "name": f"Scan {args.signatures} signatures (sequential)",
            "unit": "seconds",
            "value": benchmark_scan(args.signatures, 1),
        },
        {
            "name": f"Scan {args.signatures} signatures ({args.workers} workers)",
            "unit": "seconds",
            "value": benchmark_scan(args.signatures, args.workers),
        },
    ]

    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
