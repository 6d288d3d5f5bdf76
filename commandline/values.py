"""
Immutable, ordered collections of command-line string values.

Values is the leaf type handed out everywhere a caller reads what was bound to an
argument or option: it never changes after construction, never contains None, and
is built anew whenever a collection needs to “grow” (see Values.of).
"""
from collections.abc import Iterable, Sequence


class Values(Sequence):
    """
    An ordered, read-only sequence of strings.

    Behaves like a tuple of str (len, indexing, slicing, iteration, equality with
    any non-string sequence) and adds the accessors used throughout the library:
    first, get(index), size, empty and to_list().

    Examples
        >>> values = Values(["3", "4"])
        >>> values.first, values.size, values.empty
        ('3', 2, False)
        >>> Values.of("1", values)
        Values('1', '3', '4')
    """
    __slots__ = ("_values",)

    def __init__(self, values=(), /):
        if isinstance(values, str):
            values = (values,)
        elif not isinstance(values, Iterable):
            raise TypeError("Values() argument must be a string or an iterable of strings")
        values = tuple(values)
        for value in values:
            if not isinstance(value, str):
                raise TypeError("Values() items must be strings, not %s" % type(value).__name__)
        self._values = values

    @classmethod
    def of(cls, first, remainder=(), /):
        """
        Build a new collection with `first` prepended to `remainder`.
        """
        if not isinstance(first, str):
            raise TypeError("Values.of() first argument must be a string")
        return cls((first, *remainder))

    @property
    def first(self):
        """
        The first value; IndexError when the collection is empty.
        """
        try:
            return self._values[0]
        except IndexError:
            raise IndexError("first value requested from an empty collection") from None

    @property
    def size(self):
        return len(self._values)

    @property
    def empty(self):
        return not self._values

    def get(self, index, /):
        return self._values[index]

    def to_list(self, into=None, /):
        """
        Return the values as a new list, or extend `into` with them and return it.
        """
        if into is None:
            return list(self._values)
        into.extend(self._values)
        return into

    def __getitem__(self, index):
        if isinstance(index, slice):
            return type(self)(self._values[index])
        return self._values[index]

    def __len__(self):
        return len(self._values)

    def __iter__(self):
        return iter(self._values)

    def __eq__(self, other):
        if isinstance(other, Values):
            return self._values == other._values
        if isinstance(other, Sequence) and not isinstance(other, str):
            return self._values == tuple(other)
        return NotImplemented

    def __hash__(self):
        return hash(self._values)

    def __repr__(self):
        return "Values(%s)" % ", ".join(map(repr, self._values))

    def __rich_repr__(self):
        yield from self._values


__all__ = ("Values",)
