# range_constraints.py
from dataclasses import dataclass


class ConstraintError(ValueError):
    pass


@dataclass(frozen=True)
class Constraints:
    """Input bounds of the array manipulation exercise (all inclusive)."""
    n_min: int = 3
    n_max: int = 10_000_000
    m_min: int = 1
    m_max: int = 200_000
    a_min: int = 1
    a_max: int = 9_999_999
    b_min: int = 2
    b_max: int = 10_000_000
    k_min: int = 0
    k_max: int = 1_000_000_000

    def check(self, n, queries):
        if not self.n_min <= n <= self.n_max:
            raise ConstraintError(f"n={n} outside [{self.n_min}, {self.n_max}]")
        m = len(queries)
        if not self.m_min <= m <= self.m_max:
            raise ConstraintError(f"m={m} outside [{self.m_min}, {self.m_max}]")

        for i, q in enumerate(queries):
            try:
                a, b, k = q
            except (TypeError, ValueError):
                raise ConstraintError(f"query #{i}: expected (a, b, k), got {q!r}") from None
            for name, v, lo, hi in (("a", a, self.a_min, self.a_max),
                                    ("b", b, self.b_min, self.b_max),
                                    ("k", k, self.k_min, self.k_max)):
                if not lo <= v <= hi:
                    raise ConstraintError(f"query #{i}: {name}={v} outside [{lo}, {hi}]")
