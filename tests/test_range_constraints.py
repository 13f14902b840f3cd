import pytest

from range_constraints import ConstraintError, Constraints
from range_update import array_manipulation


def test_defaults_accept_exercise_input():
    Constraints().check(10, [(1, 5, 3), (4, 8, 7), (6, 9, 1)])


@pytest.mark.parametrize("n, queries, bad", [
    (2, [(1, 2, 1)], "n=2"),
    (10, [], "m=0"),
    (10, [(1, 5, 3), (4, 8, -1)], "k=-1"),
    (10, [(1, 1, 3)], "b=1"),
    (10, [(1, 5, 10**9 + 1)], "k=1000000001"),
])
def test_violations(n, queries, bad):
    with pytest.raises(ConstraintError, match=bad):
        Constraints().check(n, queries)


def test_custom_bounds():
    c = Constraints(n_min=1, b_min=1, k_min=-10)
    c.check(1, [(1, 1, -10)])


def test_array_manipulation_checks_constraints():
    with pytest.raises(ConstraintError):
        array_manipulation(10, [(1, 5, -3)], constraints=Constraints())
    assert array_manipulation(10, [(1, 5, 3)], constraints=Constraints()) == 3


def test_wrong_arity_names_query():
    with pytest.raises(ConstraintError, match=r"query #1"):
        Constraints().check(10, [(1, 5, 3), (4, 8)])


def test_array_manipulation_accepts_generator_with_constraints():
    queries = ((a, a + 2, 5) for a in (1, 2, 3))
    assert array_manipulation(10, queries, constraints=Constraints()) == 15
