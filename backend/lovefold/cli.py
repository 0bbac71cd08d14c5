#!/usr/bin/env python3
"""
LoveFold command line interface

Usage:
    lovefold encode Alice Bob --strategy cysteine
    lovefold fold Alice Bob --output alice_bob.pdb
    lovefold analyze prediction.pdb --sequence ALICEWPHWPNQN --json
    lovefold strategies
"""
import argparse
import json
import sys
from typing import List, Optional

from .config import configure_logging
from .esmfold_adapter import ESMFoldAdapter
from .fold_types import LengthError, LinkerStrategy
from .narrative import describe_protein
from .pipeline import fold_names, format_display_name
from .sequence_encoder import DEFAULT_STRATEGY, LINKER_CONFIGS, create_love_sequence
from .structure_analyzer import parse_pdb_stats
from .validation import validate_pdb

STRATEGY_CHOICES = [s.value for s in LinkerStrategy]


def _print_stats(stats) -> None:
    dims = stats.dimensions
    print(f"Residues:        {stats.residue_count}")
    print(f"Atoms:           {stats.atom_count} ({stats.backbone_atoms} CA)")
    print(f"Mean pLDDT:      {stats.average_plddt} ({stats.confidence_level.value})")
    print(f"Dimensions:      {dims.width} x {dims.height} x {dims.depth} A")
    print(f"Molecular weight: {stats.molecular_weight} kDa")


def cmd_encode(args) -> int:
    result = create_love_sequence(args.name1, args.name2, args.strategy)
    if isinstance(result, LengthError):
        print(f"Error: {result.message}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(result.sequence)
    return 0


def cmd_strategies(args) -> int:
    if args.json:
        print(json.dumps({s.value: c.to_dict() for s, c in LINKER_CONFIGS.items()}, indent=2))
        return 0

    for strategy, config in LINKER_CONFIGS.items():
        marker = "*" if strategy == DEFAULT_STRATEGY else " "
        print(f"{marker} {strategy.value:<9} {config.motif:<7} {config.display_name}: {config.description}")
    return 0


def cmd_analyze(args) -> int:
    with open(args.pdb_file, "r") as f:
        pdb_content = f.read()

    validation = validate_pdb(pdb_content)
    if not validation.is_valid:
        print(f"Error: {validation.error}", file=sys.stderr)
        return 1

    stats = parse_pdb_stats(pdb_content)
    personality = describe_protein(stats, args.sequence) if args.sequence else None

    if args.json:
        print(json.dumps({"stats": stats.to_dict(), "personality": personality}, indent=2))
        return 0

    _print_stats(stats)
    if personality:
        print(f"\n{personality}")
    return 0


def cmd_fold(args) -> int:
    adapter = ESMFoldAdapter(cache_dir=None) if args.no_cache else ESMFoldAdapter()
    report = fold_names(args.name1, args.name2, args.strategy, adapter=adapter)

    if isinstance(report, LengthError):
        print(f"Error: {report.message}", file=sys.stderr)
        return 1
    if not report.fold.ok:
        print(f"Error: {report.fold.error}", file=sys.stderr)
        return 1

    if args.output:
        with open(args.output, "w") as f:
            f.write(report.fold.pdb_content)

    if args.json:
        print(json.dumps(report.to_dict(include_pdb=False), indent=2))
        return 0

    print(f"{format_display_name(args.name1)} + {format_display_name(args.name2)}")
    print(f"Sequence ({report.love_sequence.strategy.value}): {report.love_sequence.sequence}\n")
    _print_stats(report.stats)
    print(f"\n{report.personality}")
    if args.output:
        print(f"\nSaved structure to: {args.output}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lovefold",
        description="Turn two names into a protein and describe its fold",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default from LOVEFOLD_LOG_LEVEL)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode = subparsers.add_parser("encode", help="Print the love sequence for two names")
    encode.add_argument("name1")
    encode.add_argument("name2")
    encode.add_argument("--strategy", choices=STRATEGY_CHOICES, default=DEFAULT_STRATEGY.value)
    encode.add_argument("--json", action="store_true", help="Output JSON only")
    encode.set_defaults(func=cmd_encode)

    fold = subparsers.add_parser("fold", help="Fold two names with ESMFold")
    fold.add_argument("name1")
    fold.add_argument("name2")
    fold.add_argument("--strategy", choices=STRATEGY_CHOICES, default=DEFAULT_STRATEGY.value)
    fold.add_argument("--output", "-o", help="Write the predicted PDB to this path")
    fold.add_argument("--no-cache", action="store_true", help="Skip the local prediction cache")
    fold.add_argument("--json", action="store_true", help="Output JSON only")
    fold.set_defaults(func=cmd_fold)

    analyze = subparsers.add_parser("analyze", help="Summarize an existing PDB file")
    analyze.add_argument("pdb_file", help="Path to PDB file to analyze")
    analyze.add_argument("--sequence", help="Folded sequence, enables the personality sentence")
    analyze.add_argument("--json", action="store_true", help="Output JSON only")
    analyze.set_defaults(func=cmd_analyze)

    strategies = subparsers.add_parser("strategies", help="List linker strategies")
    strategies.add_argument("--json", action="store_true", help="Output JSON only")
    strategies.set_defaults(func=cmd_strategies)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
