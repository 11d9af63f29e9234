"""Benchmark helper for character slicing latency over UTF-8 buffers."""
from __future__ import annotations

import argparse
import statistics
from dataclasses import dataclass
from time import perf_counter
from typing import Sequence

from stringslice import CharSlicer, SlicerSettings


@dataclass(slots=True)
class BenchmarkResult:
    label: str
    size_bytes: int
    char_offset: int
    validate: bool
    runtimes_ms: list[float]

    @property
    def median_ms(self) -> float:
        return statistics.median(self.runtimes_ms)

    @property
    def size_kb(self) -> float:
        return self.size_bytes / 1024


def _default_cases(char_total: int) -> Sequence[tuple[str, bytes]]:
    return (
        ("ASCII", ("a" * char_total).encode("utf-8")),
        ("3-byte CJK", ("界" * char_total).encode("utf-8")),
        ("4-byte emoji", ("😎" * char_total).encode("utf-8")),
        ("Mixed", ("Ùníc😎de " * (char_total // 8 + 1))[:char_total].encode("utf-8")),
    )


def run_benchmarks(
    cases: Sequence[tuple[str, bytes]],
    *,
    fractions: Sequence[float],
    repeat: int,
    validate: bool,
) -> list[BenchmarkResult]:
    slicer = CharSlicer(SlicerSettings(validate_utf8=validate))
    results: list[BenchmarkResult] = []
    for label, payload in cases:
        total = slicer.char_count(payload)
        for fraction in fractions:
            offset = min(total, int(total * fraction))
            runtimes: list[float] = []
            for _ in range(max(1, repeat)):
                started = perf_counter()
                slicer.slice(payload, (offset, offset + 1))
                runtimes.append((perf_counter() - started) * 1000.0)
            results.append(
                BenchmarkResult(
                    label=label,
                    size_bytes=len(payload),
                    char_offset=offset,
                    validate=validate,
                    runtimes_ms=runtimes,
                )
            )
    return results


def main() -> None:
    parser = argparse.ArgumentParser(description="Measure character slicing latency on synthetic text.")
    parser.add_argument("--chars", type=int, default=100_000, help="Characters per synthetic document.")
    parser.add_argument(
        "--fraction",
        action="append",
        type=float,
        help="Relative position of the sliced character; can be supplied multiple times.",
    )
    parser.add_argument("--repeat", type=int, default=5, help="Timed runs per case and position.")
    parser.add_argument("--validate", action="store_true", help="Enable UTF-8 validation while scanning.")
    parser.add_argument("--json", action="store_true", help="Emit machine-readable JSON results.")
    args = parser.parse_args()

    fractions = args.fraction or [0.0, 0.5, 1.0]
    if any(value < 0.0 or value > 1.0 for value in fractions):
        parser.error("--fraction values must be between 0 and 1.")

    results = run_benchmarks(
        _default_cases(max(1, args.chars)),
        fractions=fractions,
        repeat=args.repeat,
        validate=args.validate,
    )

    if args.json:
        import json

        payload = [
            {
                "label": result.label,
                "size_bytes": result.size_bytes,
                "char_offset": result.char_offset,
                "validate": result.validate,
                "median_ms": result.median_ms,
            }
            for result in results
        ]
        print(json.dumps(payload, indent=2))
        return

    max_label = max(len(result.label) for result in results)
    header = f"{'Text':<{max_label}}  Size (KB)  Char offset  Median (ms)"
    print(header)
    print("-" * len(header))
    for result in results:
        print(
            f"{result.label:<{max_label}}  "
            f"{result.size_kb:>9.1f}  "
            f"{result.char_offset:>11,}  "
            f"{result.median_ms:>11.3f}"
        )

    medians = [result.median_ms for result in results]
    print()
    print(
        "Slice latency → min: "
        f"{min(medians):.3f} ms · median: {statistics.median(medians):.3f} ms · max: {max(medians):.3f} ms"
    )


if __name__ == "__main__":
    main()
