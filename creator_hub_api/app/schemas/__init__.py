"""
Pydantic schema definitions for entities and API payloads.

Each domain defines a ``*Create`` model holding only the fields a
caller supplies and a full entity model that adds the fields the store
assigns (id, timestamps, counters and status flags).  Entity models are
what the store keeps; response models such as ``UserRead`` control
what leaves the API.
"""
