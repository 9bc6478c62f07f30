"""
Command-line interface for b32u64.

Usage:
    b32u64 encode <value>...      Encode decimal or 0x-hex integers
    b32u64 decode <text>...       Decode 13-character strings
    b32u64 bench [--rounds N]     Time encode/decode over the reference vectors

Environment:
    B32U64_BENCH_ROUNDS   Iterations per vector for bench (default: 200000)
"""
from __future__ import annotations

import argparse
import json
import os
import sys
import time

from ..core.errors import B32Error
from ..core.uint64 import encode_uint64, encode_uint64_to_string, decode_uint64, parse_uint64
from ..core.vectors import KNOWN_VECTORS


DEFAULT_BENCH_ROUNDS = int(os.environ.get("B32U64_BENCH_ROUNDS", "200000"))


def parse_int(text: str) -> int:
    """Parse a decimal or 0x-prefixed hex integer."""
    return int(text, 0)


def cmd_encode(args: argparse.Namespace) -> int:
    """Encode integers to base-32."""
    status = 0
    results = []
    for text in args.values:
        try:
            encoded = encode_uint64_to_string(parse_int(text))
        except ValueError as e:
            print(f"ERROR: {text}: {e}", file=sys.stderr)
            status = 1
            continue
        results.append({"value": text, "encoded": encoded})
        if not args.json:
            print(encoded)

    if args.json:
        print(json.dumps(results, indent=2))
    return status


def cmd_decode(args: argparse.Namespace) -> int:
    """Decode base-32 strings to integers."""
    status = 0
    results = []
    for text in args.texts:
        try:
            value = parse_uint64(text)
        except B32Error as e:
            print(f"ERROR: {e}", file=sys.stderr)
            status = 1
            continue
        results.append({"encoded": text, "value": value})
        if not args.json:
            print(value if args.decimal else f"{value:#018x}")

    if args.json:
        print(json.dumps(results, indent=2))
    return status


def cmd_bench(args: argparse.Namespace) -> int:
    """Time encode and decode per reference vector."""
    rounds = args.rounds
    if rounds < 1:
        print(f"ERROR: rounds must be positive, got {rounds}", file=sys.stderr)
        return 1

    buf = bytearray(13)
    rows = []
    for value, encoded in KNOWN_VECTORS:
        src = encoded.encode("ascii")

        start = time.perf_counter()
        for _ in range(rounds):
            encode_uint64(value, buf)
        enc_ns = (time.perf_counter() - start) * 1e9 / rounds

        start = time.perf_counter()
        for _ in range(rounds):
            decode_uint64(src)
        dec_ns = (time.perf_counter() - start) * 1e9 / rounds

        rows.append({"value": f"{value:#018x}", "encoded": encoded,
                     "encode_ns": round(enc_ns, 1), "decode_ns": round(dec_ns, 1)})

    if args.json:
        print(json.dumps({"rounds": rounds, "results": rows}, indent=2))
        return 0

    print(f"Rounds per vector: {rounds:,}")
    print(f"  {'value':<20} {'encoded':<15} {'encode':>12} {'decode':>12}")
    for row in rows:
        print(f"  {row['value']:<20} {row['encoded']:<15} "
              f"{row['encode_ns']:>9.1f} ns {row['decode_ns']:>9.1f} ns")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="b32u64",
        description="Encode and decode 64-bit integers as 13-character base-32 strings",
    )
    parser.add_argument("--json", action="store_true", help="Machine-readable JSON output")

    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode", help="Encode integers")
    encode_parser.add_argument("values", nargs="+", help="Decimal or 0x-hex integers")
    encode_parser.set_defaults(func=cmd_encode)

    decode_parser = subparsers.add_parser("decode", help="Decode base-32 strings")
    decode_parser.add_argument("texts", nargs="+", help="13-character encoded strings")
    decode_parser.add_argument(
        "--decimal",
        action="store_true",
        help="Print decoded values in decimal instead of hex",
    )
    decode_parser.set_defaults(func=cmd_decode)

    bench_parser = subparsers.add_parser("bench", help="Benchmark encode/decode")
    bench_parser.add_argument(
        "--rounds",
        type=int,
        default=DEFAULT_BENCH_ROUNDS,
        help=f"Iterations per vector (default: {DEFAULT_BENCH_ROUNDS})",
    )
    bench_parser.set_defaults(func=cmd_bench)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
