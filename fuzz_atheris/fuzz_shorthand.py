#!/usr/bin/env python3
"""Font Shorthand Parser Fuzzer (Atheris).

Targets: fontshorthand.syntax.parser.ShorthandParser,
         fontshorthand.syntax.serializer.serialize

Invariants:
- parse() never raises for any str input
- Failure yields exactly one error; success yields none
- Roundtrip: parse(serialize(font)) == font for every successful parse

Pattern Routing:
Deterministic round-robin over a weighted schedule. Pattern selection is
independent of the fuzzed bytes to avoid coverage-guided mutation bias.

Usage:
    python fuzz_atheris/fuzz_shorthand.py -max_total_time=60

Requires Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass, field
from typing import Any

_atheris_mod: Any = None

try:  # noqa: SIM105 - need module ref for dependency check
    import atheris as _atheris_mod  # type: ignore[no-redef]
except ImportError:
    pass

if _atheris_mod is None:
    print("-" * 80, file=sys.stderr)
    print("ERROR: Missing required dependency for fuzzing: atheris", file=sys.stderr)
    print("Install with: pip install -e '.[fuzz]'", file=sys.stderr)
    print("-" * 80, file=sys.stderr)
    sys.exit(1)

import atheris  # noqa: E402  # pylint: disable=C0412,C0413

# --- State ---


@dataclass
class ShorthandFuzzerState:
    """Iteration counters for the final report."""

    iterations: int = 0
    parsed: int = 0
    rejected: int = 0
    findings: int = 0
    pattern_coverage: dict[str, int] = field(default_factory=dict)


_state = ShorthandFuzzerState()


class ShorthandFuzzError(Exception):
    """Raised when a parser invariant is breached."""


# Pattern weights: (name, weight)
_PATTERN_WEIGHTS: tuple[tuple[str, int], ...] = (
    ("raw_text", 30),
    ("structured", 50),
    ("quote_heavy", 20),
)

_PATTERN_SCHEDULE: tuple[str, ...] = tuple(
    name for name, weight in _PATTERN_WEIGHTS for _ in range(weight)
)

# --- Instrumentation ---

logging.getLogger("fontshorthand").setLevel(logging.CRITICAL)

atheris.enabled_hooks.add("str")
atheris.enabled_hooks.add("RegEx")

with atheris.instrument_imports(include=["fontshorthand"]):
    from fontshorthand.constants import (
        ABSOLUTE_SIZE_KEYWORDS,
        ANGLE_UNITS,
        LENGTH_UNITS,
        STRETCH_KEYWORDS,
        WEIGHT_KEYWORDS,
    )
    from fontshorthand.syntax import ShorthandParser, serialize

_parser = ShorthandParser()

_VARIATION_WORDS: tuple[str, ...] = (
    "italic",
    "oblique",
    "small-caps",
    *WEIGHT_KEYWORDS,
    *STRETCH_KEYWORDS,
)


# --- Input Builders ---


def _pick(fdp: atheris.FuzzedDataProvider, options: tuple[str, ...]) -> str:
    return options[fdp.ConsumeIntInRange(0, len(options) - 1)]


def _build_structured(fdp: atheris.FuzzedDataProvider) -> str:
    parts = [_pick(fdp, _VARIATION_WORDS) for _ in range(fdp.ConsumeIntInRange(0, 4))]
    if fdp.ConsumeBool():
        parts.append(f"oblique {fdp.ConsumeIntInRange(-90, 90)}{_pick(fdp, ANGLE_UNITS)}")
    if fdp.ConsumeBool():
        size = _pick(fdp, ABSOLUTE_SIZE_KEYWORDS)
    else:
        size = f"{fdp.ConsumeIntInRange(0, 999)}{_pick(fdp, LENGTH_UNITS)}"
    if fdp.ConsumeBool():
        size = f"{size}/{fdp.ConsumeUnicodeNoSurrogates(6)}"
    parts.append(size)
    parts.append(fdp.ConsumeUnicodeNoSurrogates(40))
    return " ".join(parts)


def _build_quote_heavy(fdp: atheris.FuzzedDataProvider) -> str:
    quote = _pick(fdp, ('"', "'"))
    body = fdp.ConsumeUnicodeNoSurrogates(30).replace("|", quote).replace("~", "\\")
    return f"12px {quote}{body}"


def _verify(source: str) -> None:
    font, errors = _parser.parse(source)
    if font is None:
        _state.rejected += 1
        if len(errors) != 1:
            msg = f"Rejected input produced {len(errors)} errors: {source[:200]!r}"
            raise ShorthandFuzzError(msg)
        return

    _state.parsed += 1
    if errors:
        msg = f"Parsed input also produced errors: {source[:200]!r}"
        raise ShorthandFuzzError(msg)

    text = serialize(font)
    reparsed, _ = _parser.parse(text)
    if reparsed != font:
        msg = (
            f"Roundtrip failure: P(S(P(x))) != P(x)\n"
            f"Source: {source[:200]!r}\n"
            f"Serialized: {text[:200]!r}"
        )
        raise ShorthandFuzzError(msg)


def test_one_input(data: bytes) -> None:
    """Atheris entry point: build one input and check the invariants."""
    pattern = _PATTERN_SCHEDULE[_state.iterations % len(_PATTERN_SCHEDULE)]
    _state.iterations += 1
    _state.pattern_coverage[pattern] = _state.pattern_coverage.get(pattern, 0) + 1

    fdp = atheris.FuzzedDataProvider(data)
    match pattern:
        case "structured":
            source = _build_structured(fdp)
        case "quote_heavy":
            source = _build_quote_heavy(fdp)
        case _:
            source = fdp.ConsumeUnicodeNoSurrogates(fdp.remaining_bytes())

    try:
        _verify(source)
    except ShorthandFuzzError:
        _state.findings += 1
        raise


def main() -> None:
    """Run the shorthand fuzzer with CLI support."""
    parser = argparse.ArgumentParser(
        description="Font shorthand parser fuzzer using Atheris/libFuzzer",
        epilog="All unrecognized arguments are passed to libFuzzer.",
    )
    _, remaining = parser.parse_known_args()

    if not any(arg.startswith("-rss_limit_mb") for arg in remaining):
        remaining.append("-rss_limit_mb=2048")

    sys.argv = [sys.argv[0], *remaining]

    print("=" * 80)
    print("Font Shorthand Parser Fuzzer (Atheris)")
    print("Target:     ShorthandParser.parse, serialize")
    print(f"Schedule:   {len(_PATTERN_SCHEDULE)} slots")
    print("=" * 80)

    try:
        atheris.Setup(sys.argv, test_one_input)
        atheris.Fuzz()
    finally:
        print(
            f"iterations={_state.iterations} parsed={_state.parsed} "
            f"rejected={_state.rejected} findings={_state.findings}"
        )


if __name__ == "__main__":
    main()
