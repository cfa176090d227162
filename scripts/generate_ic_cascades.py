# scripts/generate_ic_cascades.py

"""
Generate synthetic cascades by running IC on a Barabási–Albert graph.

Creates:
  data/cascades/cascade_{i}.txt
"""

import argparse
from pathlib import Path

import networkx as nx

from cascim.diffusion import generate_ic_cascades, write_cascade


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate synthetic IC cascades.")
    parser.add_argument("--n", type=int, default=1000, help="Number of nodes in the BA graph.")
    parser.add_argument("--m", type=int, default=3, help="Edges to attach per new node.")
    parser.add_argument("--num-cascades", type=int, default=50)
    parser.add_argument("--num-seeds", type=int, default=1, help="Random seeds per cascade.")
    parser.add_argument("--activation-prob", type=float, default=0.1)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument(
        "--out-dir",
        type=str,
        default=None,
        help="Output directory (default: <repo_root>/data/cascades)",
    )
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    ROOT = Path(__file__).resolve().parents[1]
    out_dir = ROOT / "data" / "cascades" if args.out_dir is None else Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    print(f"Generating BA graph with n={args.n}, m={args.m}, seed={args.seed} ...")
    G = nx.barabasi_albert_graph(n=args.n, m=args.m, seed=args.seed)

    print(f"Simulating {args.num_cascades} cascades (p={args.activation_prob}) ...")
    cascades = generate_ic_cascades(
        G,
        num_cascades=args.num_cascades,
        num_seeds=args.num_seeds,
        activation_prob=args.activation_prob,
        base_seed=args.seed,
        verbose=args.verbose,
    )

    for i, C in enumerate(cascades):
        write_cascade(C, str(out_dir / f"cascade_{i}.txt"))

    print(f"Saved {len(cascades)} cascades under {out_dir}")


if __name__ == "__main__":
    main()
