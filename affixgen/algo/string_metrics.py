from typing import List, Optional


def distance(a: str, b: str, limit: Optional[int] = None,
             ins_cost: int = 1, del_cost: int = 1, sub_cost: int = 1) -> int:
    """
    Levenshtein distance between two strings, with custom costs of operations and a limit.

    The limit makes calculation cheaper when all we want to know is "whether the strings are close
    enough": as soon as it is clear the distance is ``limit`` or more, ``limit`` is returned. So the
    result is always ``min(real_distance, limit)``.

    It is an iterative algorithm with two rows of the matrix (see `Wikipedia
    <https://en.wikipedia.org/wiki/Levenshtein_distance#Iterative_with_two_matrix_rows>`_), with
    costs applied multiplicatively to each cell candidate. The first row and column are *not* scaled
    by costs (they are 0, 1, 2, ... as in unweighted distance).

    >>> distance('this is a book', 'i am a cook')
    6
    >>> distance('abcdefg', 'mmmmmmm', limit=3)
    3

    Args:
      a: string to compare
      b: string to compare
      limit: maximum distance we are interested in (``None`` for no limit)
      ins_cost: multiplier for insertion
      del_cost: multiplier for deletion
      sub_cost: multiplier for substitution
    """

    if min(ins_cost, del_cost, sub_cost) < 0:
        raise ValueError(f'Costs should be non-negative, got {(ins_cost, del_cost, sub_cost)!r}')
    if limit is not None and limit < 0:
        raise ValueError(f'Limit should be non-negative, got {limit!r}')

    # At least that many insertions/deletions is required anyway
    if limit is not None and abs(len(a) - len(b)) >= limit:
        return limit

    prev: List[int] = list(range(len(a) + 1))
    curr: List[int] = [0] * (len(a) + 1)

    for i, b_char in enumerate(b):
        curr[0] = i + 1

        for j, a_char in enumerate(a):
            curr[j + 1] = min(
                (prev[j + 1] + 1) * del_cost,
                (curr[j] + 1) * ins_cost,
                (prev[j] + (a_char != b_char)) * sub_cost
            )

        # Row minimum never decreases with the next rows, so if it already reached the limit,
        # the final cell will too
        if limit is not None and min(curr) >= limit:
            return limit

        prev, curr = curr, prev

    # Rows were swapped at the end of the loop
    result = prev[-1]
    return result if limit is None else min(result, limit)


def distance_limited(a: str, b: str, limit: int) -> int:
    """
    :func:`distance` with all costs equal to 1.

    >>> distance_limited('abcdef', '', 3)
    3
    """
    return distance(a, b, limit)


def distance_weighted(a: str, b: str, ins_cost: int, del_cost: int, sub_cost: int) -> int:
    """
    :func:`distance` without limit.

    >>> distance_weighted('000', '000a', 10, 2, 10)
    2
    """
    return distance(a, b, None, ins_cost, del_cost, sub_cost)
