from cascim.errors import EmptyInputError, InvalidParameterError
from cascim.graphs import Cascade, CascadeStore, load_cascades_from_dir, read_cascade
from cascim.diffusion import calculate_influence, reachable_from
from cascim.selection import GreedyResult, greedy_influence_maximization, select_seeds

__version__ = "0.1.0"
