from ._lib.fn import chain, thread
from ._lib.msg import (
    AppendChildOfLeaf,
    ChildrenOfLeaf,
    DownFromEmptyBranch,
    DownFromLeaf,
    Error,
    InsertChildOfLeaf,
    InsertLeftOfRoot,
    InsertRightOfRoot,
    LeftOfLeftmost,
    RemoveOfRoot,
    RightOfRightmost,
    UpFromRoot,
    ZipperError,
    unwrap,
)
from ._lib.shapes import mapping, record, sequence
from ._lib.zipper import Capabilities, Crumb, Loc, zipper

__all__ = [
    'AppendChildOfLeaf',
    'Capabilities',
    'ChildrenOfLeaf',
    'Crumb',
    'DownFromEmptyBranch',
    'DownFromLeaf',
    'Error',
    'InsertChildOfLeaf',
    'InsertLeftOfRoot',
    'InsertRightOfRoot',
    'LeftOfLeftmost',
    'Loc',
    'RemoveOfRoot',
    'RightOfRightmost',
    'UpFromRoot',
    'ZipperError',
    'chain',
    'mapping',
    'record',
    'sequence',
    'thread',
    'unwrap',
    'zipper',
]
