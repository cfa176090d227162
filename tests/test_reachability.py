import itertools

from cascim.diffusion import reach_from, reachable_from
from cascim.graphs import Cascade


def test_reach_from_root_covers_tree(tree_cascade):
    assert reachable_from(tree_cascade, {1}) == 4


def test_reach_follows_direction_only(tree_cascade):
    assert reachable_from(tree_cascade, {2}) == 2
    assert reachable_from(tree_cascade, {4}) == 1


def test_cycle_terminates_and_counts_each_node_once(cycle_cascade):
    assert reachable_from(cycle_cascade, {1}) == 3
    assert reachable_from(cycle_cascade, {1, 2, 3}) == 3


def test_seed_absent_from_cascade_is_counted(tree_cascade):
    assert reachable_from(tree_cascade, {99}) == 1
    assert reachable_from(tree_cascade, {2, 99}) == 3


def test_empty_seed_set_reaches_nothing(tree_cascade):
    assert reachable_from(tree_cascade, set()) == 0
    assert reach_from(tree_cascade, []).reached_by_hop == []


def test_overlapping_seeds_not_double_counted(tree_cascade):
    assert reachable_from(tree_cascade, {1, 2}) == 4


def test_duplicate_edges_are_harmless():
    C = Cascade.from_edges([(1, 2), (1, 2), (2, 3), (2, 3)])
    assert reachable_from(C, {1}) == 3


def test_reached_by_hop_frontiers(tree_cascade):
    res = reach_from(tree_cascade, {1})
    assert res.reached_by_hop == [{1}, {2, 3}, {4}]
    assert res.all_reached == {1, 2, 3, 4}


def test_max_hops_truncates(tree_cascade):
    assert reach_from(tree_cascade, {1}, max_hops=1).num_reached() == 3
    assert reach_from(tree_cascade, {1}, max_hops=0).num_reached() == 1


def test_inputs_not_mutated(tree_cascade):
    seeds = {1}
    before = dict(tree_cascade.adjacency)
    reachable_from(tree_cascade, seeds)
    assert seeds == {1}
    assert dict(tree_cascade.adjacency) == before


def test_monotone_and_at_least_seed_count():
    C = Cascade.from_edges([(1, 2), (2, 3), (3, 1), (4, 5), (5, 6), (6, 2)])
    nodes = [1, 2, 3, 4, 5, 6, 7]
    subsets = [
        set(s) for r in range(1, 4) for s in itertools.combinations(nodes, r)
    ]
    for S in subsets:
        assert reachable_from(C, S) >= len(S)
        for extra in nodes:
            assert reachable_from(C, S) <= reachable_from(C, S | {extra})
