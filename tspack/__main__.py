"""CLI entry point: python -m tspack <command>"""

import argparse
import sys


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="tspack",
        description="Time-series data packer CLI",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- pack ---
    pack_parser = subparsers.add_parser("pack", help="Pack a timestamp,value CSV into ranges")
    pack_parser.add_argument("input", type=str, help="Input CSV with timestamp,value columns")
    pack_parser.add_argument("-o", "--output", type=str, required=True,
                             help="Output CSV with start,end,value columns")
    pack_parser.add_argument("-s", "--strategy", action="append", default=[],
                             help="Strategy to apply, repeatable and applied in order: "
                                  "similar, mean:<percent>, delta, xor")
    _add_window_args(pack_parser)
    pack_parser.add_argument("--epsilon-merge", action="store_true",
                             help="Merge ranges whose values are within epsilon, not only equal ones")

    # --- unpack ---
    unpack_parser = subparsers.add_parser("unpack", help="Expand a packed CSV back into samples")
    unpack_parser.add_argument("input", type=str, help="Packed CSV with start,end,value columns")
    unpack_parser.add_argument("-o", "--output", type=str, required=True,
                               help="Output CSV with timestamp,value columns")

    # --- compare ---
    compare_parser = subparsers.add_parser("compare", help="Compare every strategy on one input")
    compare_parser.add_argument("input", type=str, help="Input CSV with timestamp,value columns")
    _add_window_args(compare_parser)
    compare_parser.add_argument("--mean-percent", type=int, default=5,
                                help="Tolerance band for the mean strategy (default: 5)")

    args = parser.parse_args(argv)

    from .cli_formatting import print_error, setup_logging
    setup_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    from .errors import PackError

    try:
        if args.command == "pack":
            _cmd_pack(args)
        elif args.command == "unpack":
            _cmd_unpack(args)
        elif args.command == "compare":
            _cmd_compare(args)
    except (PackError, ValueError, OSError) as exc:
        print_error(str(exc))
        return 1
    return 0


def _add_window_args(subparser):
    subparser.add_argument("-w", "--window", type=int, default=1_000_000,
                           help="Time window in microseconds (default: 1000000)")
    subparser.add_argument("-e", "--epsilon", type=float, default=0.0,
                           help="Precision epsilon for value comparisons (default: 0)")


def _has_header(first_line: str) -> bool:
    if not first_line.strip():
        return False
    try:
        [float(field) for field in first_line.strip().split(",")]
    except ValueError:
        return True
    return False


def _load_columns(input_path, n_columns: int):
    """Load a numeric CSV with an optional header row."""
    import numpy as np
    from pathlib import Path

    path = Path(input_path)
    if path.suffix not in (".csv", ".txt"):
        raise ValueError(f"Unsupported input format: {path.suffix}. Use .csv")

    with open(path, "r", encoding="utf-8") as f:
        lines = [line for line in f if line.strip()]
    skip = 1 if lines and _has_header(lines[0]) else 0
    if len(lines) <= skip:
        return np.empty((0, n_columns), dtype=np.float64)

    data = np.loadtxt(lines[skip:], delimiter=",", ndmin=2, dtype=np.float64)
    if data.shape[1] != n_columns:
        raise ValueError(f"Expected {n_columns} columns in {path.name}, got {data.shape[1]}")
    return data


def _cmd_pack(args):
    import numpy as np
    from .cli_formatting import console, print_pack_results
    from .config import PackAttributes, PackStrategy
    from .packer import TimeSeriesDataPacker

    strategies = tuple(PackStrategy.parse(s) for s in args.strategy)
    attrs = PackAttributes(
        strategy_types=strategies,
        microseconds_time_window=args.window,
        precision_epsilon=args.epsilon,
        epsilon_merge=args.epsilon_merge,
    )

    data = _load_columns(args.input, 2)
    console.print(f"[bold]Packing[/bold] {args.input} ({len(data):,} samples)...")

    packer = TimeSeriesDataPacker()
    packed = packer.pack(data.tolist(), attrs)

    rows = np.array([(start, end, value) for (start, end), value in packed],
                    dtype=np.float64).reshape(-1, 3)
    np.savetxt(args.output, rows, delimiter=",", header="start,end,value",
               comments="", fmt="%.17g")

    print_pack_results(
        n_samples=len(data),
        n_ranges=len(packed),
        strategies=", ".join(str(s) for s in strategies),
        window_us=args.window,
        epsilon=args.epsilon,
        output=args.output,
    )


def _cmd_unpack(args):
    import numpy as np
    from .cli_formatting import console, print_unpack_results
    from .representation import expand_ranges

    data = _load_columns(args.input, 3)
    console.print(f"[bold]Unpacking[/bold] {args.input} ({len(data):,} ranges)...")

    samples = expand_ranges(((start, end), value) for start, end, value in data.tolist())

    rows = np.array(samples, dtype=np.float64).reshape(-1, 2)
    np.savetxt(args.output, rows, delimiter=",", header="timestamp,value",
               comments="", fmt="%.17g")

    print_unpack_results(n_ranges=len(data), n_samples=len(samples), output=args.output)


def _cmd_compare(args):
    from .cli_formatting import console, print_comparison
    from .evaluation.metrics import compare_strategies

    data = _load_columns(args.input, 2)
    console.print(f"[bold]Comparing strategies[/bold] on {args.input} ({len(data):,} samples)...")

    results = compare_strategies(
        data.tolist(),
        microseconds_time_window=args.window,
        precision_epsilon=args.epsilon,
        mean_percent=args.mean_percent,
    )
    print_comparison(results)


if __name__ == "__main__":
    sys.exit(main())
