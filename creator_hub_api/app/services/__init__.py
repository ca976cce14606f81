"""
Service layer.

Each service holds the rules the HTTP layer applies around the store:
duplicate checks, referential existence checks, password hashing and
the payment flow.  Services receive the store explicitly, so they work
with any ``Storage`` implementation.  They signal rule violations with
built‑in exceptions (``ValueError``, ``LookupError``,
``PermissionError``) that the endpoints translate into HTTP errors.
"""
