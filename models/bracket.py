"""Bracket topology for the 12-team playoff.

The bracket is fixed, so it is described entirely by lookup tables.
- First Round: seeds 5-12 play (seed, 17 - seed): 5v12, 8v9, 6v11, 7v10
- Quarterfinals: seeds 1-4 have a bye and host a First Round winner in a bowl
- Semifinals: two Quarterfinal bowls feed each Semifinal bowl
- Championship: the two Semifinal winners

Bowls in bracket order (top half first):

    Sugar  (4 vs 5/12) --+
                         +-- Peach --+
    Orange (1 vs 8/9)  --+           |
                                     +-- National Championship
    Rose   (3 vs 6/11) --+           |
                         +-- Fiesta -+
    Cotton (2 vs 7/10) --+
"""

from __future__ import annotations

import config

# First Round pairings in bracket order
FIRST_ROUND_PAIRS = [(5, 12), (8, 9), (6, 11), (7, 10)]

# Quarterfinal bowl -> (host seed, First Round pair feeding it)
QUARTERFINAL_BOWLS = {
    config.SUGAR_BOWL: (4, (5, 12)),
    config.ORANGE_BOWL: (1, (8, 9)),
    config.ROSE_BOWL: (3, (6, 11)),
    config.COTTON_BOWL: (2, (7, 10)),
}

# Semifinal bowl -> the two Quarterfinal bowls feeding it
SEMIFINAL_BOWLS = {
    config.PEACH_BOWL: (config.SUGAR_BOWL, config.ORANGE_BOWL),
    config.FIESTA_BOWL: (config.ROSE_BOWL, config.COTTON_BOWL),
}


def validate_seed(seed: int) -> int:
    """Return the seed if it is a valid playoff seed, else raise ValueError."""
    if isinstance(seed, bool) or not isinstance(seed, int) or not 1 <= seed <= config.NUM_SEEDS:
        raise ValueError(f"Invalid seed: {seed!r}")
    return seed


def has_bye(seed: int) -> bool:
    return validate_seed(seed) in config.BYE_SEEDS


def first_round_opponent_seed(seed: int) -> int:
    """Seed faced in the First Round. Bye seeds have no First Round game."""
    if has_bye(seed):
        raise ValueError(f"Seed {seed} has a First Round bye")
    return 17 - seed


def first_round_pair(seed: int) -> tuple[int, int]:
    """The (higher, lower) seed pair of a seed's First Round game."""
    other = first_round_opponent_seed(seed)
    return min(seed, other), max(seed, other)


def quarterfinal_bowl(seed: int) -> str:
    """The Quarterfinal bowl a seed plays in, as host or as First Round winner."""
    validate_seed(seed)
    for bowl, (host, pair) in QUARTERFINAL_BOWLS.items():
        if seed == host or seed in pair:
            return bowl
    raise ValueError(f"Seed {seed} is not in any Quarterfinal bowl")


def host_seed(bowl: str) -> int:
    """The bye seed hosting a Quarterfinal bowl."""
    if bowl not in QUARTERFINAL_BOWLS:
        raise ValueError(f"Not a Quarterfinal bowl: {bowl!r}")
    return QUARTERFINAL_BOWLS[bowl][0]


def feeder_pair(bowl: str) -> tuple[int, int]:
    """The First Round pair whose winner plays in a Quarterfinal bowl."""
    if bowl not in QUARTERFINAL_BOWLS:
        raise ValueError(f"Not a Quarterfinal bowl: {bowl!r}")
    return QUARTERFINAL_BOWLS[bowl][1]


def semifinal_bowl_for(qf_bowl: str) -> str:
    """The Semifinal bowl a Quarterfinal bowl feeds."""
    for sf_bowl, feeders in SEMIFINAL_BOWLS.items():
        if qf_bowl in feeders:
            return sf_bowl
    raise ValueError(f"Not a Quarterfinal bowl: {qf_bowl!r}")


def semifinal_bowl(seed: int) -> str:
    return semifinal_bowl_for(quarterfinal_bowl(seed))


def sibling_quarterfinal(qf_bowl: str) -> str:
    """The other Quarterfinal bowl feeding the same Semifinal."""
    first, second = SEMIFINAL_BOWLS[semifinal_bowl_for(qf_bowl)]
    return second if qf_bowl == first else first


def other_semifinal(sf_bowl: str) -> str:
    if sf_bowl not in SEMIFINAL_BOWLS:
        raise ValueError(f"Not a Semifinal bowl: {sf_bowl!r}")
    return next(b for b in SEMIFINAL_BOWLS if b != sf_bowl)


def seeds_in_bowl(bowl: str) -> list[int]:
    """All seeds that could play in a bowl, in ascending order."""
    if bowl in QUARTERFINAL_BOWLS:
        host, pair = QUARTERFINAL_BOWLS[bowl]
        return sorted([host, *pair])
    if bowl in SEMIFINAL_BOWLS:
        return sorted(s for qf in SEMIFINAL_BOWLS[bowl] for s in seeds_in_bowl(qf))
    if bowl == config.CHAMPIONSHIP_BOWL:
        return list(range(1, config.NUM_SEEDS + 1))
    raise ValueError(f"Unknown bowl: {bowl!r}")


def round_of_bowl(bowl: str) -> str:
    """The round key a bowl's game is stored under."""
    if bowl in QUARTERFINAL_BOWLS:
        return "quarterfinals"
    if bowl in SEMIFINAL_BOWLS:
        return "semifinals"
    if bowl == config.CHAMPIONSHIP_BOWL:
        return "championship"
    if bowl == config.FIRST_ROUND_BOWL:
        return "firstRound"
    raise ValueError(f"Unknown bowl: {bowl!r}")
