"""
Service layer abstraction.

Services encapsulate the business logic behind the API handlers.  The
employee service holds its records in memory; replacing it with a
database‑backed implementation would not require changes to the
handlers.
"""
