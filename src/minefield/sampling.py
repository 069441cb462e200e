"""
Uniform sampling helpers used for mine placement.
"""
import random
from typing import Iterable, List, TypeVar

T = TypeVar("T")


def choose_multiple(
    items: Iterable[T], count: int, rng: random.Random
) -> List[T]:
    """
    Choose ``count`` items uniformly without replacement in a single pass.

    Reservoir sampling (Algorithm R): every item ends up in the result
    with probability ``count / n`` regardless of its position.

    Args:
        items: Items to sample from; consumed once.
        count: Number of items to choose.
        rng: Random source.

    Returns:
        The chosen items. Shorter than ``count`` if ``items`` ran out.
    """
    if count < 0:
        raise ValueError("Sample size cannot be negative")
    if count == 0:
        return []

    iterator = iter(items)
    reservoir: List[T] = []
    for item in iterator:
        reservoir.append(item)
        if len(reservoir) == count:
            break

    if len(reservoir) < count:
        return reservoir

    for offset, item in enumerate(iterator):
        slot = rng.randrange(count + offset + 1)
        if slot < count:
            reservoir[slot] = item

    return reservoir
