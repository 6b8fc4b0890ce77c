"""
values returned in place of a location when a move or edit is not possible
"""


class Error:
    """
    Base class for all failed moves and edits.

    Errors are falsy so the result of a move can be tested the same way
    as a missing value, e.g. ``loc.down() or loc.right()``.
    """

    __slots__ = ()

    @property
    def kind(self):
        name = type(self).__name__
        return ''.join(
            '_' + c.lower() if c.isupper() and i else c.lower()
            for i, c in enumerate(name)
        )

    def __bool__(self):
        return False

    def __eq__(self, other):
        return type(self) is type(other)

    def __hash__(self):
        return hash(type(self))

    def __repr__(self):
        return '{0}()'.format(type(self).__name__)


class DownFromLeaf(Error):
    """down() from a node that is not a branch"""

    __slots__ = ()


class DownFromEmptyBranch(Error):
    """down() from a branch without children"""

    __slots__ = ()


class UpFromRoot(Error):
    __slots__ = ()


class LeftOfLeftmost(Error):
    __slots__ = ()


class RightOfRightmost(Error):
    __slots__ = ()


class ChildrenOfLeaf(Error):
    __slots__ = ()


class InsertLeftOfRoot(Error):
    __slots__ = ()


class InsertRightOfRoot(Error):
    __slots__ = ()


class AppendChildOfLeaf(Error):
    __slots__ = ()


class InsertChildOfLeaf(Error):
    __slots__ = ()


class RemoveOfRoot(Error):
    __slots__ = ()


class ZipperError(IndexError):
    def __init__(self, error):
        super().__init__(error.kind)
        self.error = error


def unwrap(result):
    """
    Returns result unchanged unless it is an Error, in which case
    ZipperError is raised.
    """
    if isinstance(result, Error):
        raise ZipperError(result)
    return result
