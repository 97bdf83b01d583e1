"""Users module: accounts and roles.

Authentication routes (register, login, refresh, profile) live in
travlr.core.auth; this module owns the User model and repository.
"""
