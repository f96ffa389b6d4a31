class ContextGraphError(Exception):
    """Base class for engine consistency violations."""
    pass


class DuplicateNodeError(ContextGraphError):
    """Raised when a node id is already present in the graph."""
    pass


class DanglingEdgeError(ContextGraphError):
    """Raised when an edge endpoint does not reference a node in the graph."""
    pass


class UnknownNodeError(ContextGraphError, KeyError):
    """Raised on lookup of a node id the graph does not hold."""
    pass


class ExportFormatError(ContextGraphError, ValueError):
    """Raised when an export document cannot be parsed or restored."""
    pass
