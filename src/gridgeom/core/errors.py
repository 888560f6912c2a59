"""Exceptions raised on broken geometry preconditions."""

from __future__ import annotations


class ContractViolation(AssertionError):
    """A caller passed geometry that an operation's contract forbids.

    Degenerate rectangles and merges of non-adjacent rectangles are
    programmer errors, not runtime conditions to recover from.
    """
