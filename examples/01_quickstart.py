#!/usr/bin/env python3
"""Example: Quickstart — relex

Minimal working example: pull tokens from an expression one at a
time, then scan a whole buffer and look at the lexeme views.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install relex
"""
from __future__ import annotations

import relex

SOURCE = """\
// shipping rule
(weight * rate) + handling >= 150
zone <> 3
"""


def main() -> None:
    print(f"relex version: {relex.__version__}")

    # Step 1: pull tokens lazily
    lexer = relex.Lexer(SOURCE)
    while (token := lexer.next_token()) is not None:
        print(f"  {token!r:40} lexeme={token.text!r}")

    # Step 2: scan everything at once and inspect byte ranges
    tokens = relex.tokenize(SOURCE)
    identifiers = [t for t in tokens if t.type is relex.TokenType.IDENTIFIER]
    print(f"\n{len(tokens)} tokens, {len(identifiers)} identifiers")
    for t in identifiers:
        print(f"  {t.text:10} bytes {t.lexeme.byte_start}..{t.lexeme.byte_end}")

    # Step 3: anything outside the grammar ends the scan
    stopped = relex.Lexer("a + b; c")
    print(f"\nScan of 'a + b; c': {[t.text for t in stopped]}")
    print(f"Stopped at: {stopped.stopped_at()!r}")


if __name__ == "__main__":
    main()
