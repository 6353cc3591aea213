from itertools import zip_longest


class Singleton:
    """Class with a single instance"""

    def __new__(cls):
        obj = object.__new__(cls)
        cls.__new__ = lambda _: obj
        return obj


class Option:
    """An optional value: either Some(value) or Nothing.

    Only the two subclasses below exist. Code that needs to tell them apart
    asks `is_empty()` instead of testing the class.
    """


class NothingType(Singleton, Option):
    """The absent value"""

    @staticmethod
    def is_empty():
        return True

    @staticmethod
    def get():
        raise ValueError("Nothing has no value")

    @staticmethod
    def get_or_else(default):
        return default

    @staticmethod
    def or_else(alternative):
        return alternative()

    def map(self, _func):
        return self

    def flat_map(self, _func):
        return self

    def filter(self, _predicate):
        return self

    @staticmethod
    def __iter__():
        return iter([])

    @staticmethod
    def __len__():
        return 0

    def __repr__(self):
        return 'Nothing'


Nothing = NothingType()


class Some(tuple, Option):
    """A present value.

    Some is immutable. It iterates over its single value, so
    `for x in option` runs zero or one times.
    """

    def __new__(cls, value):
        return super().__new__(cls, (value,))

    @staticmethod
    def is_empty():
        return False

    def get(self):
        return self[0]

    def get_or_else(self, _default):
        return self[0]

    def or_else(self, _alternative):
        return self

    def map(self, func):
        return Some(func(self[0]))

    def flat_map(self, func):
        return func(self[0])

    def filter(self, predicate):
        if predicate(self[0]):
            return self
        return Nothing

    def __setattr__(self, *args, **kwargs):
        raise TypeError("'{}' object does not support item assignment".format(type(self).__name__))

    def __eq__(self, other):
        return isinstance(other, Some) and self[0] == other[0]

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((Some, self[0]))

    def __repr__(self):
        return 'Some({!r})'.format(self[0])


_NO_HEAD = object()


class NilList(Singleton):
    """The empty ConsList"""

    @staticmethod
    def is_empty():
        return True

    def prepend(self, item):
        return ConsList(item, self)

    @property
    def head(self):
        raise IndexError("head of empty list")

    @property
    def tail(self):
        raise IndexError("tail of empty list")

    @staticmethod
    def __iter__():
        return iter([])

    @staticmethod
    def __len__():
        return 0

    def __repr__(self):
        return 'ConsList()'


Nil = NilList()


class ConsList(tuple):
    """Finite singly linked list.

    This container type is immutable and persistent: prepending shares the
    existing list as the new tail.
    """

    def __new__(cls, head=_NO_HEAD, tail=Nil):
        if head is _NO_HEAD:
            return Nil
        return super().__new__(cls, (head, tail))

    @classmethod
    def of(cls, *items):
        result = Nil
        for item in reversed(items):
            result = cls(item, result)
        return result

    @staticmethod
    def is_empty():
        return False

    def prepend(self, item):
        return ConsList(item, self)

    @property
    def head(self):
        return self[0]

    @property
    def tail(self):
        return self[1]

    def __iter__(self):
        node = self
        while not node.is_empty():
            yield node.head
            node = node.tail

    def __len__(self):
        count = 0
        node = self
        while not node.is_empty():
            count += 1
            node = node.tail
        return count

    def __setattr__(self, *args, **kwargs):
        raise TypeError("'{}' object does not support item assignment".format(type(self).__name__))

    def __eq__(self, other):
        if not isinstance(other, ConsList):
            return False
        missing = object()
        return all(a == b for a, b in zip_longest(self, other, fillvalue=missing))

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(tuple(iter(self)))

    def __repr__(self):
        return 'ConsList({})'.format(', '.join(repr(item) for item in self))
