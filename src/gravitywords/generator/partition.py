"""Split a grid's cell count into word lengths."""


def gen_partitions(total: int, min_len: int, max_len: int) -> list[list[int]]:
    """Generate all partitions of `total` into parts between `min_len` and `max_len`.

    Parts are non-decreasing within each partition, so each multiset of lengths
    appears exactly once.  Word order is randomized later, by the selector.

    Args:
        total: Number to partition (the number of grid cells).
        min_len: Smallest allowed part.
        max_len: Largest allowed part.

    Returns:
        A list of partitions, empty if `total` cannot be reached within the bounds.
    """
    partitions: list[list[int]] = []
    if min_len <= 0:
        raise ValueError("min_len must be positive.")

    def _helper(remaining: int, current: list[int], min_next: int) -> None:
        if remaining == 0:
            partitions.append(current.copy())
            return
        if remaining < min_next:
            return
        for part in range(min_next, min(max_len, remaining) + 1):
            current.append(part)
            _helper(remaining - part, current, part)
            current.pop()

    if total > 0:
        _helper(total, [], min_len)
    return partitions
