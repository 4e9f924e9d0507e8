"""
Persistence for termsnake (high-score records).
"""

from .record_store import FileRecordStore, MemoryRecordStore

__all__ = [
    'FileRecordStore',
    'MemoryRecordStore',
]
