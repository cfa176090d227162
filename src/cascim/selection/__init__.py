from cascim.selection.greedy import (
    GreedyResult,
    greedy_influence_maximization,
    select_seeds,
    select_seeds_from_store,
)
