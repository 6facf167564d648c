"""
Exception hierarchy for tfscope.

The analysis core never raises on bad input. These errors belong to the
command line layer, where a missing file or an unknown node id has to be
reported to the user.
"""


class TfscopeError(Exception):
    """Base class for all tfscope errors."""

    code = "TFSCOPE_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SourceNotFoundError(TfscopeError):
    """The configuration file to analyze does not exist."""

    code = "SOURCE_NOT_FOUND"

    def __init__(self, path: str):
        super().__init__(f"Configuration file not found: {path}")
        self.path = path


class NodeNotFoundError(TfscopeError):
    """A queried node id is not part of the graph."""

    code = "NODE_NOT_FOUND"

    def __init__(self, node_id: str):
        super().__init__(f"Node not found: {node_id}")
        self.node_id = node_id
