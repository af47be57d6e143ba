"""
Pydantic schema definitions for API payloads.

Each domain (problems, records, members) defines its own models for
request and response bodies.  Repositories also return these models,
so services and the progress resolver never handle raw rows.
"""
