"""
Pydantic schema definitions for API responses.

Request bodies are deliberately schema‑less (any JSON object is
stored as is), so only the response envelopes are modelled here.
"""
