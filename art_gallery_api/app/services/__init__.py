"""
Service layer abstraction.

Each service groups the query operations for one domain.  Services
are pure: they receive the full in-memory dataset and a parameter and
return the matching records in their original order, never mutating
the input.
"""
