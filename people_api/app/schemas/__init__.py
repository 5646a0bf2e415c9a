"""
Pydantic schema definitions for API payloads.

Request bodies and response bodies are separate models so that the
wire representation stays decoupled from the record store.
"""
