import pytest

from cascim.graphs import Cascade, CascadeStore


@pytest.fixture
def tree_cascade():
    # 1 -> 2 -> 4, 1 -> 3
    return Cascade.from_edges([(1, 2), (1, 3), (2, 4)], name="tree")


@pytest.fixture
def cycle_cascade():
    return Cascade.from_edges([(1, 2), (2, 3), (3, 1)], name="cycle")


@pytest.fixture
def two_disjoint_store():
    return CascadeStore(
        [
            Cascade.from_edges([(1, 2)], name="X"),
            Cascade.from_edges([(3, 4)], name="Y"),
        ]
    )


@pytest.fixture
def write_cascade_file(tmp_path):
    def _write(name, text):
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write
