"""
Repositories package

Each repository encapsulates database operations for a model:
- activity_repository.py
- document_repository.py
- etc.

Usage:
    from nolej_pc.repositories.activity_repository import ActivityRepository
    timestamps = ActivityRepository.get_generation_timestamps(document_id)
"""
