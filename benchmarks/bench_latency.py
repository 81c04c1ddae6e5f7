"""Benchmark: relex per-pull latency on comment-heavy input.

Times every ``Lexer.next_token()`` call separately.  A pull that has to
skip comment and blank lines before its token starts is the slow case;
p95 and max show how far it sits from a plain pull.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent))

import relex
from _sample import commented_source

_SCANS: int = 300

_SAMPLE = commented_source(blocks=20)


def _time_pulls(source: str) -> list[float]:
    """Drain one lexer over ``source``; return each pull's time in microseconds."""
    lexer = relex.Lexer(source)
    pulls_us: list[float] = []
    while True:
        t0 = time.perf_counter()
        token = lexer.next_token()
        pulls_us.append((time.perf_counter() - t0) * 1_000_000)
        if token is None:
            return pulls_us


def bench_scan_latency() -> dict[str, object]:
    """Benchmark per-token pull latency over a commented multi-line source.

    Returns
    -------
    dict with keys: operation, iterations, tokens_per_scan, total_seconds,
    p50_us, p95_us, max_us.
    """
    _time_pulls(_SAMPLE)

    pulls_us: list[float] = []
    for _ in range(_SCANS):
        pulls_us.extend(_time_pulls(_SAMPLE))

    pulls_us.sort()
    n = len(pulls_us)
    result: dict[str, object] = {
        "operation": "relex_pull_latency_commented",
        "iterations": n,
        "tokens_per_scan": n // _SCANS - 1,
        "total_seconds": round(sum(pulls_us) / 1_000_000, 4),
        "p50_us": round(pulls_us[n // 2], 3),
        "p95_us": round(pulls_us[min(int(n * 0.95), n - 1)], 3),
        "max_us": round(pulls_us[-1], 3),
    }
    print(
        f"[bench_latency] {result['operation']}: "
        f"p50={result['p50_us']:.3f}us  p95={result['p95_us']:.3f}us  "
        f"max={result['max_us']:.3f}us over {n:,} pulls"
    )
    return result


if __name__ == "__main__":
    result = bench_scan_latency()
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "latency_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(result, fh, indent=2)
    print(f"Results saved to {output_path}")
