"""Quick start: build a static keyword map and inspect its probe lengths.

Demonstrates:
1. Sizing a builder from the expected entry count
2. Feeding insert probe distances into a Histogram
3. Emitting the constant map artifact
"""

import sys

from staticmap import Builder, Histogram, SplitMixHash, probe_summary, serialize

KEYWORDS = [
    "as", "break", "const", "continue", "crate", "else", "enum", "extern",
    "false", "fn", "for", "if", "impl", "in", "let", "loop", "match", "mod",
    "move", "mut", "pub", "ref", "return", "self", "static", "struct",
    "super", "trait", "true", "type", "unsafe", "use", "where", "while",
]


def main():
    builder = Builder(len(KEYWORDS), SplitMixHash(seed=7))
    hist = Histogram()

    for i, word in enumerate(KEYWORDS):
        hist.insert(builder.insert(word, f"Keyword::{i}"))

    summary = probe_summary(builder)
    print(f"capacity={builder.capacity} load_factor={summary['load_factor']:.2f}", file=sys.stderr)
    print(f"insert probes: {hist.report()}(avg {hist.average():.3f})", file=sys.stderr)
    print(f"final displacements: {summary['histogram']}", file=sys.stderr)

    serialize(builder, sys.stdout)


if __name__ == "__main__":
    main()
