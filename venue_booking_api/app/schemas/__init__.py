"""
Pydantic schema definitions for the persisted dataset and API payloads.
"""
