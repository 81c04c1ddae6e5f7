"""Sample relex sources shared by the benchmarks."""
from __future__ import annotations

_LINE = "(alpha_1 + 42) * beta % 7 >= gamma <> delta / 3 - epsilon <= 2147483647 // note\n"

# Comment-only and blank lines make some pulls skip far before the next
# token starts.
_COMMENTED_BLOCK = (
    "// pricing rule\n"
    "// applies to every tier\n"
    "(total - discount) * rate % 100\n"
    "    // threshold check\n"
    "    >= threshold\n"
    "\n"
    "tier <> 3 // trailing note\n"
)


def sample_source(lines: int = 200) -> str:
    """Return a source of ``lines`` identical expression lines."""
    return _LINE * lines


def commented_source(blocks: int = 20) -> str:
    """Return ``blocks`` copies of a multi-line, comment-heavy rule."""
    return _COMMENTED_BLOCK * blocks
