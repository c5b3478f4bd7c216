"""
Reference data set used by the demo runner and integration tests
"""

from .sample_store import SampleStore


def seed_reference_players(store: SampleStore, large_entity_count: int = 10000) -> int:
    """
    Seed three players, each with two identical samples per entity.

    Player 1 stays 10cm from entities 1..200, player 2 keeps 10*i cm from
    entity i for 1..200, and player 3 does the same over 1..large_entity_count.
    Returns the number of samples inserted.
    """
    inserted = 0
    for player_id, entity_count, distance_of in (
            (1, 200, lambda i: 10),
            (2, 200, lambda i: 10 * i),
            (3, large_entity_count, lambda i: 10 * i)):
        for entity_id in range(1, entity_count + 1):
            for _ in range(2):
                store.insert_sample(player_id, entity_id, distance_of(entity_id))
                inserted += 1
    return inserted
