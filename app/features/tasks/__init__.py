"""
Task feature module.

Task mapping and the scoped task queries built from the access policies.
"""
