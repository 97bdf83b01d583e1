"""Authentication: password hashing, JWT issuance and verification, RBAC.

Import from the submodules directly (``travlr.core.auth.dependencies``,
``travlr.core.auth.backend``); this package does not re-export them.
"""
