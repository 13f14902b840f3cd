# range_update.py
import numbers

import numpy as np

INT64_MAX = np.iinfo(np.int64).max


class RangeUpdateError(ValueError):
    """Base class for rejected range-update input."""


class InvalidDimensionError(RangeUpdateError):
    pass


class InvalidRangeError(RangeUpdateError):
    """An update whose bounds do not satisfy 1 <= left <= right <= n.

    ``index`` is the position of the offending update in the input sequence
    and ``update`` is the update as it was given.
    """

    def __init__(self, index, update, reason):
        self.index = index
        self.update = update
        super().__init__(f"update #{index} {update!r}: {reason}")


def _is_int(v):
    return isinstance(v, numbers.Integral) and not isinstance(v, bool)


def _check_dimension(n):
    if not _is_int(n):
        raise TypeError(f"n must be an integer, got {type(n).__name__}")
    if n < 1:
        raise InvalidDimensionError(f"n must be >= 1, got {n}")
    return int(n)


def _delta_dtype(bound):
    # every prefix sum is bounded by sum(|delta|); past int64 keep exact Python ints
    return np.int64 if bound <= INT64_MAX else object


def _split_array(arr, n):
    if arr.dtype.kind not in "iu":
        raise TypeError(f"update array must have an integer dtype, got {arr.dtype}")
    if arr.size == 0:
        arr = arr.reshape(0, 3)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise InvalidRangeError(0, arr.shape, "expected an array of shape (q, 3)")

    left, right = arr[:, 0], arr[:, 1]
    bad = ~((left >= 1) & (left <= right) & (right <= n))
    if bad.any():
        i = int(np.flatnonzero(bad)[0])
        raise InvalidRangeError(i, tuple(int(v) for v in arr[i]),
                                f"need 1 <= left <= right <= {n}")

    deltas = arr[:, 2]
    # float estimate with headroom, exact check only when it gets close
    if np.abs(deltas.astype(float)).sum() < 2.0 ** 62:
        deltas = deltas.astype(np.int64)
    else:
        exact = [int(d) for d in deltas]
        deltas = np.array(exact, dtype=_delta_dtype(sum(abs(d) for d in exact)))
    return left.astype(np.int64), right.astype(np.int64), deltas


def _split(updates, n):
    """Validate the whole update sequence and return (lefts, rights, deltas)."""
    if isinstance(updates, np.ndarray):
        return _split_array(updates, n)

    lefts, rights, deltas = [], [], []
    for i, upd in enumerate(updates):
        try:
            left, right, delta = upd
        except (TypeError, ValueError):
            raise InvalidRangeError(i, upd, "expected a (left, right, delta) triple") from None
        if not (_is_int(left) and _is_int(right) and _is_int(delta)):
            raise TypeError(f"update #{i} {upd!r}: left, right and delta must be integers")
        if not 1 <= left <= right <= n:
            raise InvalidRangeError(i, upd, f"need 1 <= left <= right <= {n}")
        lefts.append(int(left)); rights.append(int(right)); deltas.append(int(delta))

    dtype = _delta_dtype(sum(abs(d) for d in deltas))
    return (np.array(lefts, dtype=np.int64), np.array(rights, dtype=np.int64),
            np.array(deltas, dtype=dtype))


def cumulative_profile(updates, n):
    """Cell values 1..n after every update, as an array of length n."""
    n = _check_dimension(n)
    lefts, rights, deltas = _split(updates, n)

    # index 0 unused, index n + 1 absorbs the end marker of ranges reaching n
    D = np.zeros(n + 2, dtype=deltas.dtype)
    np.add.at(D, lefts, deltas)
    np.subtract.at(D, rights + 1, deltas)
    return np.cumsum(D[1:n + 1])


def apply_updates(updates, n):
    """Maximum cell value after adding each (left, right, delta) over [left, right].

    Runs in O(n + q): each update touches two slots of a difference array and
    a single prefix-sum scan rebuilds the cells.
    """
    return int(cumulative_profile(updates, n).max())


def find_peak(updates, n):
    """Return (max value, first, last) for the first run of cells holding the max.

    ``first`` and ``last`` are 1-based and inclusive.
    """
    prof = cumulative_profile(updates, n)
    best = prof.max()
    s = int(np.argmax(prof))
    after = np.flatnonzero(prof[s:] != best)
    e = s + int(after[0]) - 1 if after.size else len(prof) - 1
    return int(best), s + 1, e + 1


def naive_max(updates, n):
    """Direct O(n*q) simulation, the reference the fast path is checked against."""
    n = _check_dimension(n)
    lefts, rights, deltas = _split(updates, n)
    cells = [0] * (n + 1)
    for left, right, delta in zip(lefts.tolist(), rights.tolist(), deltas.tolist()):
        for i in range(left, right + 1):
            cells[i] += delta
    return max(cells[1:])


def array_manipulation(n, queries, constraints=None):
    """Exercise-shaped entry point: optional bound checks, then the fast path."""
    if constraints is not None:
        # the bound checks and the fast path each take a pass over the queries
        if not isinstance(queries, np.ndarray):
            queries = list(queries)
        constraints.check(n, queries)
    return apply_updates(queries, n)
