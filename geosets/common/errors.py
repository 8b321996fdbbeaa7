# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
#
# SPDX-License-Identifier: AGPL-3.0-or-later

# Code purpose:  Define the exceptions raised by set operations and by the oracle adapters


class SetOperationError(Exception):
    """Base class for all errors raised by a set operation."""


class DimensionMismatchError(SetOperationError, ValueError):
    """Operand dimension disagrees with the dimension of the set.

    Args:
        expected (int): Dimension of the set
        got (int): Dimension of the operand
        message (str, optional): Custom message. Defaults to None, in which case a message is built from expected and
            got.
    """

    def __init__(self, expected, got, message=None):
        self.expected = expected
        self.got = got
        if message is None:
            message = f"Mismatch in dimensions (expected: {expected}, got: {got})"
        super().__init__(message)


class EmptySetError(SetOperationError, ValueError):
    """Operation requires a non-empty set."""


class SetNotImplementedError(SetOperationError, NotImplementedError):
    """Operation is not available for this combination of set and operand."""


class InfeasibleOptimizationError(SetOperationError):
    """A linear program failed or returned an infeasible/unbounded status where an optimal solution was required.

    Args:
        message (str): Description of the task that failed
        source (Exception, optional): Error raised by the solver. Defaults to None.
        status (str, optional): Status reported by the solver. Defaults to None.
    """

    def __init__(self, message, source=None, status=None):
        self.source = source
        self.status = status
        super().__init__(message)


class DataConversionError(SetOperationError, ValueError):
    """Oracle output could not be converted into the expected matrix/vector shape.

    Args:
        message (str): Description of the conversion that failed
        source (Exception, optional): Underlying error. Defaults to None.
    """

    def __init__(self, message, source=None):
        self.source = source
        super().__init__(message)


class ConvexHullError(SetOperationError):
    """Convex hull computation failed.

    Args:
        message (str): Description of the failure
        source (Exception, optional): Error raised by Qhull. Defaults to None.
    """

    def __init__(self, message, source=None):
        self.source = source
        super().__init__(message)


class InsufficientPointsError(ConvexHullError):
    """Fewer than dim + 1 points were provided for a convex hull computation."""
