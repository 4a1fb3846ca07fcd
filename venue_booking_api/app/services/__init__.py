"""
Service layer.

``BookingStore`` encapsulates all booking rules and owns the persisted
dataset.  API handlers only talk to the store, so the storage backend
can change without touching them.
"""
