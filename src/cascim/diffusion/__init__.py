from cascim.diffusion.reachability import ReachResult, reach_from, reachable_from
from cascim.diffusion.influence import (
    InfluenceSummary,
    calculate_influence,
    summarize_influence,
    total_reach,
)
from cascim.diffusion.simulate import generate_ic_cascades, simulate_ic_cascade, write_cascade
