"""
Pydantic schema definitions for API payloads.

Request bodies, stored records and response envelopes are declared
here, separate from the service layer that operates on them.
"""
