"""touban — a duty rotation ledger that lives entirely in a printable token."""

__version__ = "0.1.0"
