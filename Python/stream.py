"""
A stream is either Empty or a Node.
A Node holds a deferred head and a deferred tail; the tail produces a stream.

Nothing in a Node is evaluated before somebody asks for it, and nothing is
evaluated twice. That makes it possible to describe infinite sequences and to
consume them front to back, as long as the consumer stops on its own (`take`,
`take_while`, `find`, `exists`, ...).

Eager consumers such as `to_list` or an unconditional `fold_right` require the
stream to be finite. On an infinite stream they do not terminate.
"""

from itertools import zip_longest

from deferred import Deferred
from functional_data_structures import Singleton, Some, Nothing, ConsList

REPR_PREVIEW = 3


def _cell(thunk):
    if isinstance(thunk, Deferred):
        return thunk
    return Deferred(thunk)


class Stream:
    """Operations shared by Empty and Node.

    Only those two shapes exist; methods tell them apart with `is_empty()`.
    """

    @staticmethod
    def empty():
        return empty()

    @staticmethod
    def of(*values):
        return of(*values)

    @staticmethod
    def unfold(seed, step):
        return unfold(seed, step)

    @staticmethod
    def from_iterable(iterable):
        return from_iterable(iterable)

    # ---- consumers ----

    def __iter__(self):
        stream = self
        while not stream.is_empty():
            yield stream.head
            stream = stream.tail

    def to_list(self):
        return list(self)

    def to_cons_list(self):
        return ConsList.of(*self)

    def head_option(self):
        if self.is_empty():
            return Nothing
        return Some(self.head)

    def fold_right(self, zero, combine):
        """Right fold whose combine function receives the rest of the fold
        as a zero-argument callable.

        The rest is only computed if `combine` calls it, so a combine function
        that can decide from the head alone stops the traversal there.
        """
        if self.is_empty():
            return zero
        return combine(self.head, lambda: self.tail.fold_right(zero, combine))

    def fold_left(self, zero, combine):
        result = zero
        for item in self:
            result = combine(result, item)
        return result

    def find(self, predicate):
        for item in self:
            if predicate(item):
                return Some(item)
        return Nothing

    def exists(self, predicate):
        # Same result as fold_right(False, lambda x, rest: predicate(x) or rest()),
        # without growing the call stack on long prefixes.
        for item in self:
            if predicate(item):
                return True
        return False

    def for_all(self, predicate):
        for item in self:
            if not predicate(item):
                return False
        return True

    # ---- lazy transformers ----

    def take(self, n):
        if n <= 0 or self.is_empty():
            return Empty
        if n == 1:
            return Node(self._head, Deferred.of(Empty))
        return Node(self._head, Deferred(lambda: self.tail.take(n - 1)))

    def drop(self, n):
        stream = self
        while n > 0 and not stream.is_empty():
            stream = stream.tail
            n -= 1
        return stream

    def take_while(self, predicate):
        if self.is_empty() or not predicate(self.head):
            return Empty
        return Node(self._head, Deferred(lambda: self.tail.take_while(predicate)))

    def take_while_via_fold_right(self, predicate):
        return self.fold_right(Empty, lambda item, rest: cons(lambda: item, rest) if predicate(item) else Empty)

    def map(self, func):
        return self.fold_right(Empty, lambda item, rest: cons(lambda: func(item), rest))

    def filter(self, predicate):
        # skipping runs of rejected items iteratively keeps long gaps off the call stack
        stream = self
        while not stream.is_empty() and not predicate(stream.head):
            stream = stream.tail
        if stream.is_empty():
            return Empty
        return Node(stream._head, Deferred(lambda: stream.tail.filter(predicate)))

    def append(self, other):
        """stream of this stream's items followed by those of other(), which is
        only called once this stream is exhausted"""
        if self.is_empty():
            return other()
        return Node(self._head, Deferred(lambda: self.tail.append(other)))

    def flat_map(self, func):
        # items mapped to an empty stream are skipped iteratively, as in filter
        stream = self
        while not stream.is_empty():
            inner = func(stream.head)
            if not inner.is_empty():
                source = stream
                return inner.append(lambda: source.tail.flat_map(func))
            stream = stream.tail
        return Empty

    def map_via_unfold(self, func):
        def step(cell):
            stream = cell()
            if stream.is_empty():
                return Nothing
            return Some((func(stream.head), stream._tail))

        return unfold(Deferred.of(self), step)

    def take_via_unfold(self, n):
        def step(state):
            cell, remaining = state
            if remaining <= 0:
                return Nothing
            stream = cell()
            if stream.is_empty():
                return Nothing
            return Some((stream.head, (stream._tail, remaining - 1)))

        return unfold((Deferred.of(self), n), step)

    def take_while_via_unfold(self, predicate):
        def step(cell):
            stream = cell()
            if stream.is_empty() or not predicate(stream.head):
                return Nothing
            return Some((stream.head, stream._tail))

        return unfold(Deferred.of(self), step)

    def zip_with(self, other, combine):
        def step(cells):
            left, right = cells[0](), cells[1]()
            if left.is_empty() or right.is_empty():
                return Nothing
            return Some((combine(left.head, right.head), (left._tail, right._tail)))

        return unfold((Deferred.of(self), Deferred.of(other)), step)

    def zip(self, other):
        return self.zip_with(other, lambda a, b: (a, b))

    def zip_all(self, other):
        """Pairs of Options, as long as the longer of both streams.

        Once one side is exhausted its position holds Nothing.
        """

        def advance(stream):
            if stream.is_empty():
                return Deferred.of(Empty)
            return stream._tail

        def step(cells):
            left, right = cells[0](), cells[1]()
            if left.is_empty() and right.is_empty():
                return Nothing
            pair = (left.head_option(), right.head_option())
            return Some((pair, (advance(left), advance(right))))

        return unfold((Deferred.of(self), Deferred.of(other)), step)

    def starts_with(self, prefix):
        return (self.zip_all(prefix)
                .take_while(lambda pair: not pair[1].is_empty())
                .for_all(lambda pair: pair[0] == pair[1]))

    def tails(self):
        """stream of all suffixes, from the whole stream down to Empty"""

        def step(cell):
            stream = cell()
            if stream.is_empty():
                return Nothing
            return Some((stream, stream._tail))

        return unfold(Deferred.of(self), step).append(lambda: of(Empty))

    def has_subsequence(self, other):
        return self.tails().exists(lambda suffix: suffix.starts_with(other))

    def scan_right(self, zero, combine):
        """Intermediate results of a right fold, in the order of `tails()`.

        The last item is zero. Evaluation is eager, so the stream must be
        finite.
        """
        accumulated = zero
        result = Node(Deferred.of(zero), Deferred.of(Empty))
        for item in reversed(self.to_list()):
            accumulated = combine(item, accumulated)
            result = Node(Deferred.of(accumulated), Deferred.of(result))
        return result

    # ---- comparison and display ----

    def __eq__(self, other):
        if not isinstance(other, Stream):
            return NotImplemented
        missing = object()
        return all(a == b for a, b in zip_longest(self, other, fillvalue=missing))

    __hash__ = None

    def __repr__(self):
        items = []
        stream = self
        while not stream.is_empty():
            if len(items) == REPR_PREVIEW:
                items.append('...')
                break
            head = stream._head.peek(default=_UNKNOWN)
            items.append('?' if head is _UNKNOWN else repr(head))
            # a forced tail is always a stream, so None means "not forced yet"
            stream = stream._tail.peek()
            if stream is None:
                items.append('...')
                break
        return 'Stream({})'.format(', '.join(items))


_UNKNOWN = object()


class EmptyStream(Singleton, Stream):
    """The terminal stream"""

    @staticmethod
    def is_empty():
        return True

    @property
    def head(self):
        raise IndexError("head of empty stream")

    @property
    def tail(self):
        raise IndexError("tail of empty stream")


Empty = EmptyStream()


class Node(Stream):
    """Non-empty stream: a deferred head and a deferred tail."""

    def __init__(self, head, tail):
        object.__setattr__(self, '_head', head)
        object.__setattr__(self, '_tail', tail)

    @staticmethod
    def is_empty():
        return False

    @property
    def head(self):
        return self._head.force()

    @property
    def tail(self):
        return self._tail.force()

    def __setattr__(self, *args, **kwargs):
        raise TypeError("'{}' object does not support item assignment".format(type(self).__name__))


def cons(head, tail):
    """Build a Node from two zero-argument callables without calling either.

    `head` produces the first item and `tail` the rest of the stream.
    """
    return Node(_cell(head), _cell(tail))


def empty():
    return Empty


def of(*values):
    result = Empty
    for value in reversed(values):
        result = Node(Deferred.of(value), Deferred.of(result))
    return result


def unfold(seed, step):
    """General corecursive generator.

    step(seed) returns Nothing to end the stream, or Some((item, next_seed)).
    The call producing the rest of the stream waits in the tail until forced.
    """
    option = step(seed)
    if option.is_empty():
        return Empty
    item, next_seed = option.get()
    return Node(Deferred.of(item), Deferred(lambda: unfold(next_seed, step)))


def from_iterable(iterable):
    """stream that pulls items from iterable as its nodes are forced

    The first item is pulled right away to decide whether the stream is empty.
    Each later item is pulled when the tail before it is forced.
    """
    iterator = iter(iterable)

    def step(_):
        try:
            item = next(iterator)
        except StopIteration:
            return Nothing
        return Some((item, None))

    return unfold(None, step)

