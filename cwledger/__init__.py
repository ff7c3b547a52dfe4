"""In-memory multi-token ledger with operator approvals, and atomic swap records."""

__version__ = "0.1.0"

__all__ = ["chain", "contract", "errors", "msg", "queries", "state", "swap"]