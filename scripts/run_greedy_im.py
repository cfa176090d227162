# scripts/run_greedy_im.py

"""
Run greedy influence maximization over a directory of cascade files.

Each *.txt file holds one cascade as a directed edge list ("from to" per
line, '#' and '%' comment lines allowed). Default location:
  data/cascades/
"""

import argparse
from pathlib import Path

from cascim.errors import InvalidParameterError, validate_k
from cascim.graphs import load_cascades_from_dir
from cascim.report import format_report
from cascim.selection import select_seeds_from_store


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Greedy (KKT 2003) influence maximization over observed cascades."
    )
    parser.add_argument(
        "--cascade-dir",
        type=str,
        default=None,
        help="Directory of cascade files (default: <repo_root>/data/cascades)",
    )
    parser.add_argument("--k", type=int, default=1, help="Number of seeds to select.")
    parser.add_argument("--suffix", type=str, default=".txt", help="Cascade file suffix.")
    parser.add_argument(
        "--fmt",
        type=str,
        default="edge_list",
        choices=["edge_list", "gpickle"],
    )
    parser.add_argument("--lazy", action="store_true", help="Use lazy greedy (CELF).")
    parser.add_argument("--verbose", action="store_true")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        validate_k(args.k)
    except InvalidParameterError as e:
        parser.error(str(e))

    ROOT = Path(__file__).resolve().parents[1]
    if args.cascade_dir is None:
        cascade_dir = ROOT / "data" / "cascades"
    else:
        cascade_dir = Path(args.cascade_dir)

    print("\nREADING CASCADES...")
    store = load_cascades_from_dir(
        str(cascade_dir),
        suffix=args.suffix,
        fmt=args.fmt,
        verbose=args.verbose,
    )
    print(f"CASCADES READ! NUMBER OF CASCADES: {len(store)}")
    print(f"VERTEX UNIVERSE SIZE: {len(store.vertex_universe)}")

    print("\nRUNNING GREEDY ALGORITHM...")
    result = select_seeds_from_store(store, args.k, lazy=args.lazy, verbose=args.verbose)
    print("GREEDY ALGORITHM FINISHED!\n")

    if len(result.seeds) < args.k:
        print(f"Only {len(result.seeds)} distinct nodes available; stopped early.")

    print(format_report(result))
    return result


if __name__ == "__main__":
    main()
