from functional_data_structures import Some
from stream import cons, unfold


def from_(n):
    """stream of successive integers starting at n"""
    return unfold(n, lambda i: Some((i, i + 1)))


def constant(a):
    """stream that repeats a forever"""
    return unfold(a, lambda s: Some((s, s)))


def ones():
    """stream that repeats 1 forever"""
    return constant(1)


def fibs():
    """stream of the Fibonacci numbers 0, 1, 1, 2, 3, 5, ..."""
    return unfold((0, 1), lambda pair: Some((pair[0], (pair[1], pair[0] + pair[1]))))


def from_via_cons(n):
    return cons(lambda: n, lambda: from_via_cons(n + 1))


def constant_via_cons(a):
    # a single node whose tail is the node itself
    stream = cons(lambda: a, lambda: stream)
    return stream


def fibs_via_cons():
    def go(current, following):
        return cons(lambda: current, lambda: go(following, current + following))

    return go(0, 1)
