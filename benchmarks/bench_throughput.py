"""Benchmark: relex scan throughput.

Measures how many full scans and how many tokens per second the lexer
produces using the public ``relex.tokenize()`` and ``relex.Lexer`` APIs.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent))

import relex
from _sample import sample_source

_ITERATIONS: int = 200
_PULL_ITERATIONS: int = 200

_SAMPLE = sample_source(lines=50)


def bench_scan_throughput() -> dict[str, object]:
    """Benchmark full-buffer scans with ``relex.tokenize``.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms, tokens_per_second.
    """
    token_count = len(relex.tokenize(_SAMPLE))
    start = time.perf_counter()
    for _ in range(_ITERATIONS):
        relex.tokenize(_SAMPLE)
    total = time.perf_counter() - start

    result: dict[str, object] = {
        "operation": "relex_scan_throughput",
        "iterations": _ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_ITERATIONS / total, 1),
        "avg_latency_ms": round(total / _ITERATIONS * 1000, 4),
        "tokens_per_second": round(token_count * _ITERATIONS / total, 1),
    }
    print(
        f"[bench_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"{result['tokens_per_second']:,.0f} tokens/sec"
    )
    return result


def bench_pull_throughput() -> dict[str, object]:
    """Benchmark pulling tokens one at a time with ``Lexer.next_token``.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    start = time.perf_counter()
    pulled = 0
    for _ in range(_PULL_ITERATIONS):
        lexer = relex.Lexer(_SAMPLE)
        while lexer.next_token() is not None:
            pulled += 1
    total = time.perf_counter() - start

    result: dict[str, object] = {
        "operation": "relex_pull_throughput",
        "iterations": pulled,
        "total_seconds": round(total, 4),
        "ops_per_second": round(pulled / total, 1),
        "avg_latency_ms": round(total / pulled * 1000, 6),
    }
    print(
        f"[bench_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} pulls/sec"
    )
    return result


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    for name, fn in [
        ("scan_throughput_baseline.json", bench_scan_throughput),
        ("pull_throughput_baseline.json", bench_pull_throughput),
    ]:
        output_path = results_dir / name
        with open(output_path, "w", encoding="utf-8") as fh:
            json.dump(fn(), fh, indent=2)
        print(f"Results saved to {output_path}")
