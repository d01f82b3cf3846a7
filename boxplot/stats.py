import numpy as np


def sort_values(values):
    """Return the values sorted ascending as a float array, NaNs first."""
    vs = np.sort(np.asarray(values, dtype=float))
    nan = np.isnan(vs)
    return np.concatenate((vs[nan], vs[~nan]))


def median(vs):
    """Return the median of an already sorted sequence.

    Only the middle element, or the two middle elements of an even length
    sequence, take part.
    """
    mid = len(vs) // 2
    if len(vs) % 2 == 1:
        return float(vs[mid])
    return float((vs[mid] + vs[mid - 1]) / 2)


def stats5(values):
    """Return the five statistic summary of the values.

    The summary uses the median-of-halves convention: the lower half is
    the first len // 2 sorted values and the upper half is the rest, so for
    an odd count the middle value belongs to the upper half.

    Args:
        values (list): The numbers to summarize. Not modified.

    Returns:
        tuple: (min, q1, q2, q3, max) as floats.
    """
    if len(values) == 0:
        raise ValueError("stats5 requires at least one value")

    vs = sort_values(values)
    if len(vs) == 1:
        v = float(vs[0])
        return v, v, v, v, v

    half = len(vs) // 2
    return (
        float(vs[0]),
        median(vs[:half]),
        median(vs),
        median(vs[half:]),
        float(vs[-1]),
    )
