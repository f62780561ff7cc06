"""B2B Gate: decides whether B2B-restricted storefront content is active for a visitor.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
