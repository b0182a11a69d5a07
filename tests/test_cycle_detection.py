import pytest

from wayfinder.cycle_detection import brent, floyd


def shaped(mu, lam):
    """Successor of 0, 1, 2, ... that enters a cycle of length lam at index mu."""
    last = mu + lam - 1

    def successor(x):
        return x + 1 if x < last else mu

    return successor


def iterate(f, x, times):
    for _ in range(times):
        x = f(x)
    return x


@pytest.mark.parametrize("algorithm", [floyd, brent])
@pytest.mark.parametrize("mu,lam", [(0, 1), (0, 5), (3, 1), (4, 7), (10, 3), (1, 16)])
def test_known_shape(algorithm, mu, lam):
    assert algorithm(0, shaped(mu, lam)) == (lam, mu, mu)


@pytest.mark.parametrize("algorithm", [floyd, brent])
def test_table(algorithm):
    table = [1, 2, 3, 4, 2]
    assert algorithm(0, lambda i: table[i]) == (3, 2, 2)


@pytest.mark.parametrize("start", [0, 3, 17, 42, 99])
def test_invariants_and_agreement(start):
    def f(x):
        return (x * x + 7) % 101

    result = floyd(start, f)
    assert brent(start, f) == result
    lam, first, mu = result
    assert iterate(f, start, mu) == first
    assert iterate(f, first, lam) == first
    assert all(iterate(f, first, k) != first for k in range(1, lam))
    if mu > 0:
        before = iterate(f, start, mu - 1)
        assert all(iterate(f, first, k) != before for k in range(lam))


def test_works_with_strings():
    words = {"a": "b", "b": "c", "c": "d", "d": "b"}
    assert floyd("a", words.get) == brent("a", words.get)
    lam, first, mu = floyd("a", words.get)
    assert iterate(words.get, "a", mu) == first
    assert iterate(words.get, first, lam) == first