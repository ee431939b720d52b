"""
Pydantic schema definitions for API payloads.

Dataset records are returned exactly as loaded and therefore have no
schema here; only the envelopes this service builds itself do.
"""
