"""
Custom exceptions for ordered collections.
"""


class EmptyCollection(Exception):
    """
    Raised when a query needs an element but the collection has none.

    There is no sensible default for "minimum of nothing", so callers get
    this error instead of a sentinel value.
    """

    def __init__(self, operation: str, container: str = "AVLTree"):
        """
        Initialize empty-collection error.

        Args:
            operation: Name of the query that was attempted (e.g. "min").
            container: Name of the collection type.
        """
        self.operation = operation
        self.container = container
        super().__init__(f"{container}.{operation}(): the tree is empty")
