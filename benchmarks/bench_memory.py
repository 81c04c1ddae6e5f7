"""Benchmark: memory held by the tokens of one scan.

Identifier payloads are views into the source buffer, so the retained
size should grow with the token count, not with the identifier lengths.
"""
from __future__ import annotations

import json
import sys
import tracemalloc
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent))

import relex
from _sample import sample_source

_SAMPLE = sample_source(lines=200)


def bench_scan_memory() -> dict[str, object]:
    """Benchmark memory retained by a full token list.

    Returns
    -------
    dict with keys: operation, iterations, peak_memory_kb, current_memory_kb,
    source_kb.
    """
    tracemalloc.start()
    tokens = relex.tokenize(_SAMPLE)
    current, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()

    result: dict[str, object] = {
        "operation": "relex_scan_memory",
        "iterations": len(tokens),
        "peak_memory_kb": round(peak / 1024, 2),
        "current_memory_kb": round(current / 1024, 2),
        "source_kb": round(len(_SAMPLE.encode("utf-8")) / 1024, 2),
        "ops_per_second": 0.0,
        "avg_latency_ms": 0.0,
    }
    print(
        f"[bench_memory] {result['operation']}: peak {result['peak_memory_kb']:.2f} KB "
        f"for {len(tokens)} tokens"
    )
    return result


if __name__ == "__main__":
    result = bench_scan_memory()
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "memory_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(result, fh, indent=2)
    print(f"Results saved to {output_path}")
