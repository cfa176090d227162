import os
import pickle
from typing import List

import networkx as nx
from tqdm import tqdm

from cascim.graphs.cascades import Cascade, CascadeStore

COMMENT_MARKERS = ("#", "%")


def is_comment_line(line: str) -> bool:
    """True for blank lines and lines starting with a comment marker."""
    stripped = line.strip()
    return not stripped or line.startswith(COMMENT_MARKERS)


def _edge_lines(f, path: str) -> List[str]:
    # nx.parse_edgelist silently skips short lines, so reject them here
    lines = []
    for lineno, line in enumerate(f, start=1):
        if is_comment_line(line):
            continue
        if len(line.split()) < 2:
            raise ValueError(f"{path}:{lineno}: expected 'from to', got {line.strip()!r}")
        lines.append(line)
    return lines


def read_cascade(path: str, fmt: str = "edge_list") -> Cascade:
    if not os.path.exists(path):
        raise FileNotFoundError(f"Cascade file not found: {path}")

    name = os.path.basename(path)

    if fmt == "edge_list":
        with open(path, "r") as f:
            lines = _edge_lines(f, path)
        try:
            # extra columns after "from to" are ignored with data=False
            G = nx.parse_edgelist(
                lines,
                nodetype=int,
                create_using=nx.DiGraph,
                data=False,
            )
        except TypeError as e:
            raise ValueError(f"{path}: node ids must be integers ({e})") from e
        return Cascade.from_digraph(G, name=name)

    elif fmt == "gpickle":
        with open(path, "rb") as f:
            G = pickle.load(f)
        if not isinstance(G, nx.DiGraph):
            raise ValueError("Loaded object is not a NetworkX DiGraph.")
        return Cascade.from_digraph(G, name=name)

    else:
        raise ValueError(f"Unsupported cascade format: {fmt}")


def load_cascades_from_dir(
    dir_path: str,
    suffix: str = ".txt",
    fmt: str = "edge_list",
    verbose: bool = False,
) -> CascadeStore:
    """
    Load every cascade file in a directory into a CascadeStore.

    Files are matched by name suffix and read in sorted order so that the
    cascade order is the same on every run.

    Args:
        dir_path: directory containing one cascade per file
        suffix: file name suffix to pick up (".txt" by default)
        fmt: "edge_list" or "gpickle", passed to read_cascade
        verbose: print progress

    Returns:
        CascadeStore holding the cascades and their vertex universe.
    """
    if not os.path.exists(dir_path):
        raise FileNotFoundError(f"Cascade directory not found: {dir_path}")
    if not os.path.isdir(dir_path):
        raise NotADirectoryError(f"Not a directory: {dir_path}")

    files = sorted(f for f in os.listdir(dir_path) if f.endswith(suffix))

    if verbose:
        print(f"[load] Reading {len(files)} cascade files from {dir_path} ...")

    store = CascadeStore()
    for fname in tqdm(files, disable=not verbose):
        store.add(read_cascade(os.path.join(dir_path, fname), fmt=fmt))

    if verbose:
        print(f"[load] Cascades read: {len(store)}")

    return store
