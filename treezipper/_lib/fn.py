# Helpers for stringing moves together.
# Each move is a function that takes a loc and returns either a new loc
# or an Error, e.g. Loc.down or lambda loc: loc.replace(42)

from functools import reduce as ft_reduce

from .msg import Error


def chain(*moves):
    """
    Given moves f, g, h return a function equivalent to h(g(f(loc)))
    that stops at, and returns, the first Error produced.

    >>> from treezipper import Loc, sequence
    >>> down_twice = chain(Loc.down, Loc.down)
    >>> down_twice(sequence([[1, 2], 3])).focus()
    1

    """
    reduce = ft_reduce

    def apply_(loc, f):
        if isinstance(loc, Error):
            return loc
        return f(loc)

    def chain_(loc):
        return reduce(apply_, moves, loc)
    return chain_


def thread(loc, *moves):
    """
    >>> from treezipper import Loc, sequence
    >>> thread(sequence([1, 2]), Loc.down, Loc.left)
    LeftOfLeftmost()

    """
    return chain(*moves)(loc)
