"""Analytics helpers (sample accumulation and averaging).

Kept free of heavy numeric stacks so it can be imported from any entry point.
"""
