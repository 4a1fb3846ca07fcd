"""
Top-level package for the Venue Booking API.

A mock backend for a sports-venue reservation UI.  All functionality
lives in submodules under ``app``; the package itself has no public
exports.
"""

__all__ = []
