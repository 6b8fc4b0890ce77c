from collections import namedtuple

from . import msg

Capabilities = namedtuple('Capabilities', 'is_branch, children, make_node')

# pnode is the parent as it was before descending, l holds its left
# siblings nearest first and r its right siblings in document order.
Crumb = namedtuple('Crumb', 'pnode, l, r')


def zipper(root, is_branch, children, make_node):
    """
    Returns a location focused on root.

    is_branch(node) is true if node has or can have children,
    children(node) returns the children of a branch node and
    make_node(node, children) returns a new node like node but with
    the given children.
    """
    caps = Capabilities(is_branch, children, make_node)
    return Loc(root, (), (), (), False, caps)


_Loc = namedtuple('Loc', ['current', 'l', 'r', 'parents', 'end', 'caps'])


class Loc(_Loc):

    def __repr__(self):
        return '<treezipper.Loc({0!r}) object at {1}>'.format(
            self.current, id(self),
        )

    # Context
    def focus(self):
        return self.current

    def is_branch(self):
        return self.caps.is_branch(self.current)

    def children(self):
        if not self.is_branch():
            return msg.ChildrenOfLeaf()
        return tuple(self.caps.children(self.current))

    def make_node(self, node, children):
        return self.caps.make_node(node, children)

    def lefts(self):
        return self.l[::-1]

    def rights(self):
        return self.r

    def path(self):
        """The ancestors of this location, from the root to the parent."""
        return tuple(crumb.pnode for crumb in reversed(self.parents))

    def is_end(self):
        return self.end

    def tree(self):
        return self.root().current

    # Navigation
    def down(self):
        if not self.is_branch():
            return msg.DownFromLeaf()
        children = self.children()
        if not children:
            return msg.DownFromEmptyBranch()

        crumb = Crumb(self.current, self.l, self.r)
        return self._replace(
            current=children[0],
            l=(),
            r=children[1:],
            parents=(crumb,) + self.parents,
            end=False,
        )

    def up(self):
        if not self.parents:
            return msg.UpFromRoot()

        crumb, parents = self.parents[0], self.parents[1:]
        children = self.lefts() + (self.current,) + self.r
        return self._replace(
            current=self.make_node(crumb.pnode, children),
            l=crumb.l,
            r=crumb.r,
            parents=parents,
            end=False,
        )

    def right(self):
        if not self.r:
            return msg.RightOfRightmost()
        return self._replace(
            current=self.r[0],
            l=(self.current,) + self.l,
            r=self.r[1:],
            end=False,
        )

    def left(self):
        if not self.l:
            return msg.LeftOfLeftmost()
        return self._replace(
            current=self.l[0],
            l=self.l[1:],
            r=(self.current,) + self.r,
            end=False,
        )

    def leftmost(self):
        """Returns the left most sibling at this location or self"""
        loc = self
        while loc.l:
            loc = loc.left()
        return loc

    def rightmost(self):
        """Returns the right most sibling at this location or self"""
        loc = self
        while loc.r:
            loc = loc.right()
        return loc

    def root(self):
        loc = self
        while loc.parents:
            loc = loc.up()
        return loc

    def leftmost_descendant(self):
        loc = self
        d = loc.down()
        while d:
            loc, d = d, d.down()
        return loc

    def rightmost_descendant(self):
        loc = self
        d = loc.down()
        while d:
            loc = d.rightmost()
            d = loc.down()
        return loc

    def ancestor(self, filter):
        """
        Return the first ancestor preceding the current loc that
        matches the filter(ancestor) function, or None once the root
        has been checked.
        """
        u = self.up()
        while u:
            if filter(u):
                return u
            u = u.up()
        return None

    def move_to(self, dest):
        """
        Move to the same 'position' in the tree as the given loc and return
        the loc that currently resides there. This method does not guarantee
        that the node from the previous loc will be the same node if the node
        or its ancestry has been modified.

        Returns the first error met if the position no longer exists.
        """
        moves = len(dest.l) * ['r']
        for crumb in dest.parents:
            moves.append('d')
            moves.extend(len(crumb.l) * ['r'])
        moves.reverse()

        loc = self.root()
        for m in moves:
            loc = loc.down() if m == 'd' else loc.right()
            if not loc:
                break
        return loc

    # Enumeration
    def next(self):
        """
        Visits nodes in depth-first pre-order.

        For example given the following tree:

                a
              /   \\
             b     e
             ^     ^
            c d   f g

        next() starting at a will visit b, c, d, e, f, g and then return
        to a with is_end() true. Once at the end, next() keeps returning
        the same loc.
        """
        if self.end:
            return self

        n = self.down() or self.right()
        if n:
            return n

        loc = self
        while True:
            u = loc.up()
            if not u:
                return loc._replace(end=True)
            r = u.right()
            if r:
                return r
            loc = u

    def prev(self):
        """
        Steps backwards through the depth-first pre-order walk, the
        inverse of next(). At the root this returns UpFromRoot.
        """
        if self.end:
            return self

        loc = self.left()
        if not loc:
            return self.up()
        return loc.rightmost_descendant()

    def preorder_iter(self):
        loc = self
        while not loc.end:
            yield loc
            loc = loc.next()

    def postorder_next(self):
        """
        Visits nodes in depth-first post-order.

        For example given the following tree:

                a
              /   \\
             b     e
             ^     ^
            c d   f g

        postorder next will visit the nodes in the following order
        c, d, b, f, g, e, a

        Note this method ends when it reaches the root node, where it
        returns UpFromRoot. To start traversal from the root call
        leftmost_descendant() first. See postorder_iter for an example.
        """
        r = self.right()
        if r:
            return r.leftmost_descendant()
        return self.up()

    def postorder_iter(self):
        loc = self.leftmost_descendant()
        while loc:
            yield loc
            loc = loc.postorder_next()

    def find(self, func):
        """
        Returns the first loc, in pre-order from this one, for which
        func(loc) is true. A loc at the end of a walk is searched as if
        the walk were starting over from the root.
        """
        for loc in self._replace(end=False).preorder_iter():
            if func(loc):
                return loc
        return None

    # Editing
    def edit(self, f, *args):
        """Replace the node at this loc with the value of f(node, *args)"""
        return self.replace(f(self.current, *args))

    def replace(self, value):
        return self._replace(current=value)

    def insert_left(self, item):
        """Insert item as left sibling of node without moving"""
        if not self.parents:
            return msg.InsertLeftOfRoot()
        return self._replace(l=(item,) + self.l)

    def insert_right(self, item):
        """Insert item as right sibling of node without moving"""
        if not self.parents:
            return msg.InsertRightOfRoot()
        return self._replace(r=(item,) + self.r)

    def append_child(self, item):
        """
        Inserts the item as the rightmost child of the node at this loc,
        without moving.
        """
        if not self.is_branch():
            return msg.AppendChildOfLeaf()
        return self.replace(
            self.make_node(self.current, self.children() + (item,)),
        )

    def insert_child(self, item):
        """
        Inserts the item as the leftmost child of the node at this loc,
        without moving.
        """
        if not self.is_branch():
            return msg.InsertChildOfLeaf()
        return self.replace(
            self.make_node(self.current, (item,) + self.children()),
        )

    def remove(self):
        """
        Removes the node at the current location, returning the
        loc of its left sibling, or of its parent when it has none.

        For example given the following tree:

                a
              /   \\
             b     e
             ^     ^
            c d   f g

        Removing d returns c, removing c returns b (now with d as its
        only child).
        """
        if not self.parents:
            return msg.RemoveOfRoot()

        if self.l:
            return self._replace(current=self.l[0], l=self.l[1:])

        crumb, parents = self.parents[0], self.parents[1:]
        return self._replace(
            current=self.make_node(crumb.pnode, self.r),
            l=crumb.l,
            r=crumb.r,
            parents=parents,
        )


del _Loc
