"""Design tools: regenerate tables and refit the approximation constants.

- sine_tables: table size vs. per-tier error (stdlib only)
- minimax_polys: asin/acos and atan polynomial refits (numpy + scipy)
- pade_tan: exact Pade approximants of tan (optional scipy refinement)
"""

__all__ = ["sine_tables", "minimax_polys", "pade_tan"]
