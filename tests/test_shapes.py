from collections import OrderedDict, namedtuple

from treezipper import AppendChildOfLeaf, Loc, mapping, record, sequence, thread


def _named(loc):
    return loc.focus()['name']


root = {'name': 'a', 'children': [
    {'name': 'b'},
    {'name': 'c', 'children': [
        {'name': 'd'},
        {'name': 'e'},
    ]},
]}


def test_mapping_navigation():
    loc = mapping(root)
    assert loc.is_branch()
    assert not loc.next().is_branch()
    assert [_named(l) for l in loc.preorder_iter()] == [
        'a', 'b', 'c', 'd', 'e',
    ]

    e = thread(loc, Loc.down, Loc.right, Loc.down, Loc.right)
    assert e.focus() == {'name': 'e'}
    assert [n['name'] for n in e.path()] == ['a', 'c']
    assert e.root().focus() == root


def test_mapping_edits():
    loc = mapping(root)

    def shout(node):
        children = [dict(c, name=c['name'].upper()) for c in node['children']]
        return dict(node, children=children)

    edited = thread(loc, Loc.down, Loc.right, lambda l: l.edit(shout))
    assert edited.tree() == {'name': 'a', 'children': [
        {'name': 'b'},
        {'name': 'c', 'children': [
            {'name': 'D'},
            {'name': 'E'},
        ]},
    ]}

    removed = thread(loc, Loc.down, Loc.remove)
    assert removed.focus() == {'name': 'a', 'children': [
        {'name': 'c', 'children': [{'name': 'd'}, {'name': 'e'}]},
    ]}

    assert loc.down().append_child({'name': 'x'}) == AppendChildOfLeaf()
    # the original tree is left alone
    assert [c['name'] for c in root['children']] == ['b', 'c']


def test_mapping_custom_key():
    loc = mapping({'id': 1, 'kids': [{'id': 2}]}, key='kids')
    assert loc.down().focus() == {'id': 2}
    assert loc.append_child({'id': 3}).focus() == {
        'id': 1, 'kids': [{'id': 2}, {'id': 3}],
    }


Branch = namedtuple('Branch', ['name', 'children'])
Leaf = namedtuple('Leaf', ['name'])


def test_record():
    tree = Branch('a', (Leaf('b'), Branch('c', (Leaf('d'),))))
    loc = record(tree)

    assert [l.focus().name for l in loc.preorder_iter()] == [
        'a', 'b', 'c', 'd',
    ]

    d = loc.find(lambda l: l.focus().name == 'd')
    result = d.insert_right(Leaf('e')).tree()
    assert result == Branch('a', (
        Leaf('b'),
        Branch('c', (Leaf('d'), Leaf('e'))),
    ))


def test_sequence_keeps_container_types():
    loc = sequence((1, [2, (3,)], 'abc'))
    assert [l.focus() for l in loc.preorder_iter()][1:] == [
        1, [2, (3,)], 2, (3,), 3, 'abc',
    ]

    three = loc.find(lambda l: l.focus() == 3)
    assert three.replace(4).tree() == (1, [2, (4,)], 'abc')


def test_sequence_rebuilds_namedtuples():
    Point = namedtuple('Point', ['x', 'y'])
    loc = sequence([Point(1, 2)])
    edited = thread(loc, Loc.down, Loc.down, lambda l: l.replace(10))
    assert edited.tree() == [Point(10, 2)]
    assert isinstance(edited.tree()[0], Point)


def test_sequence_namedtuple_changing_length():
    Point = namedtuple('Point', ['x', 'y'])
    loc = sequence([Point(1, 2)])

    removed = thread(loc, Loc.down, Loc.down, Loc.remove)
    assert removed.focus() == (2,)
    assert removed.tree() == [(2,)]

    appended = loc.down().append_child(3)
    assert appended.focus() == (1, 2, 3)
    assert appended.children() == (1, 2, 3)

    inserted = thread(loc, Loc.down, Loc.down, lambda l: l.insert_left(0))
    assert inserted.up().focus() == (0, 1, 2)


def test_mapping_keeps_container_types():
    tree = OrderedDict([('name', 'a'), ('children', ({'name': 'b'},))])
    loc = mapping(tree).append_child({'name': 'c'})
    assert isinstance(loc.focus(), OrderedDict)
    assert loc.focus()['children'] == ({'name': 'b'}, {'name': 'c'})

    removed = thread(mapping(tree), Loc.down, Loc.remove)
    assert isinstance(removed.focus(), OrderedDict)
    assert removed.focus()['children'] == ()
    # the original tree is left alone
    assert tree['children'] == ({'name': 'b'},)
