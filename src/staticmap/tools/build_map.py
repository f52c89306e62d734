"""Build a static map artifact from a tab-separated entry file.

Each non-blank line of the entry file is ``key<TAB>value``; lines starting
with ``#`` are comments. The value is copied into the artifact verbatim.

Example:
    staticmap-build keywords.tsv --out keywords_map.rs --seed 7 --report
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from staticmap.config import BuildConfig, load_build_config
from staticmap.hashing import HASHERS, probe_summary
from staticmap.metrics import Histogram
from staticmap.table import Builder, serialize, write_artifact
from staticmap.utils import Timer, configure_logging, get_logger

logger = get_logger("staticmap.build")


def read_entries(path: Path) -> List[Tuple[str, str]]:
    """Parse ``key<TAB>value`` lines.

    Args:
        path: Entry file

    Returns:
        List of (key, value) pairs in file order

    Raises:
        ValueError: If a non-comment line has no tab separator
    """
    pairs = []
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            line = line.rstrip("\r\n")
            if not line.strip() or line.startswith("#"):
                continue
            if "\t" not in line:
                raise ValueError(f"{path}:{lineno}: expected 'key<TAB>value'")
            key, value = line.split("\t", 1)
            pairs.append((key, value))
    return pairs


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build a static Robin Hood hash map artifact",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("entries", type=Path, help="Tab-separated key/value file")
    parser.add_argument("--config", type=Path, default=None, help="YAML build config")
    parser.add_argument("--out", type=str, default=None, help="Artifact path (default: stdout)")
    parser.add_argument("--seed", type=int, default=None, help="Hash seed (uint64)")
    parser.add_argument("--hasher", choices=sorted(HASHERS), default=None, help="Hash function")
    parser.add_argument(
        "--expected", type=int, default=None,
        help="Expected entry count for capacity planning (default: number of entries)",
    )
    parser.add_argument(
        "--report", action="store_true",
        help="Log the probe-distance histogram and table summary",
    )
    parser.add_argument("--log-file", type=str, default=None, help="Also log to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def resolve_config(args: argparse.Namespace) -> BuildConfig:
    overrides = {
        "seed": args.seed,
        "hasher": args.hasher,
        "output": args.out,
        "log_file": args.log_file,
        "expected_entries": args.expected,
    }
    if args.config is not None:
        return load_build_config(args.config, **overrides)
    return BuildConfig.from_dict({k: v for k, v in overrides.items() if v is not None})


def run(cfg: BuildConfig, pairs: Sequence[Tuple[str, str]], report: bool = False) -> Builder:
    """Insert all pairs into a fresh builder and emit the artifact.

    Args:
        cfg: Build configuration
        pairs: (key, value) pairs
        report: Log histogram and summary when True

    Returns:
        The finished builder
    """
    cfg = replace(cfg, expected_entries=max(cfg.expected_entries, len(pairs)))
    builder = Builder.from_config(cfg)
    hist = Histogram()

    with Timer(f"Inserting {len(pairs)} entries", log=logger):
        for key, value in pairs:
            hist.insert(builder.insert(key, value))

    if cfg.output is not None:
        size = write_artifact(builder, cfg.output)
        logger.info("Wrote %s (%d bytes, capacity %d)", cfg.output, size, builder.capacity)
    else:
        serialize(builder, sys.stdout)

    if report:
        summary = probe_summary(builder)
        logger.info("Insert probe distances: %s", hist.report())
        logger.info("Insert probe average: %.4f", hist.average())
        logger.info("Final displacements: %s", summary["histogram"])
        logger.info(
            "load_factor=%.3f max_displacement=%d mean_displacement=%.4f",
            summary["load_factor"],
            summary["max_displacement"],
            summary["mean_displacement"],
        )

    return builder


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        cfg = resolve_config(args)
        if cfg.log_file is not None:
            get_logger("staticmap", log_file=cfg.log_file)
        pairs = read_entries(args.entries)
    except (OSError, ValueError) as e:
        parser.error(str(e))

    logger.info("Read %d entries from %s", len(pairs), args.entries)
    run(cfg, pairs, report=args.report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
