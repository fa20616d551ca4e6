"""
Edit Rejections

Exceptions for edit requests the graph refuses to apply.
They never leave the edit controller: it logs them and reports the
operation as rejected.
"""


class RejectedOperation(Exception):
    """Base class for malformed edit input"""


class EmptyLabelError(RejectedOperation):
    """Node label is empty or whitespace only"""


class SelfLoopError(RejectedOperation):
    """Connection from a node to itself"""


class UnknownNodeError(RejectedOperation):
    """Referenced node id does not exist"""


class UnknownEdgeError(RejectedOperation):
    """Referenced edge id does not exist"""


class DuplicateIdError(RejectedOperation):
    """Node or edge id already present in the graph"""


class EmptyGraphError(RejectedOperation):
    """Operation needs at least one node"""
