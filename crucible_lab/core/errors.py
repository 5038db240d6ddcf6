# crucible_lab/core/errors.py
from __future__ import annotations


class CrucibleError(Exception):
    """Base class for every failure raised by crucible_lab."""


class MalformedGrid(CrucibleError, ValueError):
    """Input rows are ragged, contain a non-digit, or leave no move to make."""


class OutOfBounds(CrucibleError, IndexError):
    """A position escaped the grid. Always an internal bug, never bad input."""


class UnreachableDestination(CrucibleError):
    """The search finished without a destination state honouring min_run."""


class InvalidConstraints(CrucibleError, ValueError):
    pass
