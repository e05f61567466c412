"""
Core utilities shared across the accounts package.

Configuration, logging, password hashing and the caller-role gate live here so
that services never read os.environ or pick a hashing algorithm themselves.
"""
