"""
Pydantic schema definitions for API payloads.

Every resource defines a ``...Payload`` model used for both create and
partial‑update request bodies (all fields optional; required fields are
enforced by the resource rule tables) and a ``...Read`` model for
responses.  Wire names are camelCase.
"""
