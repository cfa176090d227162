import pickle

import networkx as nx
import pytest

from cascim.diffusion import reachable_from
from cascim.graphs import is_comment_line, load_cascades_from_dir, read_cascade


@pytest.mark.parametrize(
    "line, expected",
    [
        ("# header\n", True),
        ("% matrix market style\n", True),
        ("\n", True),
        ("   \n", True),
        ("1 2\n", False),
    ],
)
def test_is_comment_line(line, expected):
    assert is_comment_line(line) is expected


def test_read_cascade_skips_comments(write_cascade_file):
    path = write_cascade_file(
        "c.txt",
        "# comment\n% other comment\n\n1 2\n1 3 0.5\n2 4\n",
    )
    C = read_cascade(str(path))
    assert C.name == "c.txt"
    assert C.successors(1) == (2, 3)
    assert reachable_from(C, {1}) == 4


def test_read_cascade_malformed_line(write_cascade_file):
    path = write_cascade_file("bad.txt", "1 2\n3\n")
    with pytest.raises(ValueError, match="bad.txt:2"):
        read_cascade(str(path))


def test_read_cascade_non_integer(write_cascade_file):
    path = write_cascade_file("bad.txt", "a b\n")
    with pytest.raises(ValueError, match="integers"):
        read_cascade(str(path))


def test_read_cascade_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_cascade(str(tmp_path / "nope.txt"))


def test_read_cascade_unknown_format(write_cascade_file):
    path = write_cascade_file("c.txt", "1 2\n")
    with pytest.raises(ValueError, match="Unsupported"):
        read_cascade(str(path), fmt="csv")


def test_read_cascade_gpickle(tmp_path):
    G = nx.DiGraph([(5, 6), (6, 7)])
    path = tmp_path / "c.gpickle"
    with open(path, "wb") as f:
        pickle.dump(G, f, protocol=pickle.HIGHEST_PROTOCOL)
    C = read_cascade(str(path), fmt="gpickle")
    assert reachable_from(C, {5}) == 3


def test_load_dir_filters_suffix_and_sorts(write_cascade_file, tmp_path):
    write_cascade_file("b.txt", "3 4\n")
    write_cascade_file("a.txt", "1 2\n")
    write_cascade_file("notes.md", "9 9\n")
    store = load_cascades_from_dir(str(tmp_path))
    assert [c.name for c in store] == ["a.txt", "b.txt"]
    assert store.vertex_universe == (1, 2, 3, 4)


def test_load_dir_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_cascades_from_dir(str(tmp_path / "missing"))


def test_load_dir_not_a_directory(write_cascade_file):
    path = write_cascade_file("a.txt", "1 2\n")
    with pytest.raises(NotADirectoryError):
        load_cascades_from_dir(str(path))


def test_duplicate_edge_lines_collapse(write_cascade_file):
    path = write_cascade_file("dup.txt", "1 2\n1 2\n2 3\n")
    C = read_cascade(str(path))
    assert C.successors(1) == (2,)
    assert C.num_edges() == 2
    assert reachable_from(C, {1}) == 3


def test_read_cascade_builds_through_networkx(write_cascade_file, monkeypatch):
    calls = []
    parse = nx.parse_edgelist

    def spy(lines, **kwargs):
        calls.append(kwargs)
        return parse(lines, **kwargs)

    monkeypatch.setattr(nx, "parse_edgelist", spy)
    path = write_cascade_file("c.txt", "# header\n4 5\n")
    C = read_cascade(str(path))
    assert calls and calls[0]["nodetype"] is int
    assert C.nodes == frozenset({4, 5})
