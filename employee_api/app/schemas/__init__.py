"""
Pydantic schema definitions for API payloads.

Schemas are kept separate from the record store so the wire
representation can evolve independently of how records are held in
memory.
"""
