"""
Alert text for every rule. Each message carries a short fixed tag so a
reader can tell the alert kinds apart in the channel history.
"""
from typing import Sequence

HASHTAG = "#darkforest"


def _tx(tag: str, body: str) -> str:
    return f"Sophon {tag} TX: {body} {HASHTAG}"


def transfer_milestone(milestone: int) -> str:
    return _tx("bacd4f81", f"{milestone}th departure detected")


def congestion(in_motion: int) -> str:
    return _tx("ec1b89f9", f"Unusually high activity {in_motion} in motion")


def achievement(rank: int, player_id: str, planet_id: str) -> str:
    return _tx("5f2a90c4", f"{player_id} reached hat level {rank} on planet {planet_id}")


def artifact(rarity: str, tier: int, planet_id: str, discoverer_id: str) -> str:
    return _tx(
        "c71e3b58",
        f"{rarity.lower()} artifact unearthed on level {tier} planet {planet_id} by {discoverer_id}",
    )


def longest_transfer(duration_sec: int, player_id: str) -> str:
    return _tx("4d08e6a7", f"Longest voyage yet {duration_sec}s at light speed by {player_id}")


def value_moved(display_value: int, player_id: str) -> str:
    return _tx("06cfe9ac", f"Whale alert {display_value} silver in motion by {player_id}")


def radius(world_radius: int) -> str:
    return _tx("8d9b13c5", f"the universe has expanded to {world_radius} adjust accordingly")


def player_count(n_players: int) -> str:
    return _tx("3a656441", f"{n_players} civilizations have achieved ftl travel")


def planet_counts(counts: Sequence[int]) -> str:
    totals = ", ".join(f"lvl{level}:{count}" for level, count in enumerate(counts))
    return _tx("02369284", f"Universe planet totals: {totals}")
