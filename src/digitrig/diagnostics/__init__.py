"""Diagnostics package.

- error_report: error table for every scalar function (stdlib only)
- plot_errors: error curves per tier (requires numpy + matplotlib)
"""

__all__ = ["error_report", "plot_errors"]
