"""
Account use cases.

Each service orchestrates the repository and the role catalog to implement
one group of business rules. Outer layers (scripts, HTTP adapters) call these
services instead of touching the database directly.
"""
