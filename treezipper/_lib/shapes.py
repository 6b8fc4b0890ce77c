"""
Ready made zippers for the node shapes that come up most often.
"""

import copy
from collections.abc import Mapping, Sequence

from .zipper import zipper


def _is_sequence(node):
    return isinstance(node, Sequence) and not isinstance(node, (str, bytes))


def _make_sequence(node, children):
    # keep the container type of the node being rebuilt; a namedtuple
    # whose arity no longer fits degrades to a plain tuple
    if isinstance(node, tuple) and hasattr(node, '_fields'):
        if len(children) == len(node._fields):
            return type(node)(*children)
        return tuple(children)
    return type(node)(children)


def sequence(root):
    """
    Zipper over nested lists and tuples, e.g. [1, [2, 3], (4,)].

    Every non-string sequence is a branch and its items are its
    children. Strings and everything else are leaves. Namedtuples are
    rebuilt as plain tuples once edits change their length; use
    record() to treat them as nodes with a children field instead.
    """
    return zipper(root, _is_sequence, tuple, _make_sequence)


def mapping(root, key='children'):
    """
    Zipper over mappings that keep their children as a list under key.

    A mapping without key is a leaf; appending a child to it is refused
    rather than creating the key. Rebuilt nodes keep the type of the
    mapping and of its child container.
    """
    def is_branch(node):
        return isinstance(node, Mapping) and key in node

    def children(node):
        return node[key]

    def make_node(node, children):
        new = copy.copy(node)
        new[key] = type(node[key])(children)
        return new

    return zipper(root, is_branch, children, make_node)


def record(root, field='children'):
    """
    Zipper over namedtuple records that keep their children as a tuple
    in field. Records of a type without that field are leaves.
    """
    def is_branch(node):
        return field in getattr(node, '_fields', ())

    def children(node):
        return getattr(node, field)

    def make_node(node, children):
        return node._replace(**{field: tuple(children)})

    return zipper(root, is_branch, children, make_node)
