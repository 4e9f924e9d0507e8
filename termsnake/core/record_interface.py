"""
Abstract high-score record store.
"""

from abc import ABC, abstractmethod


class RecordStoreInterface(ABC):
    """
    Persistent best score.

    The game reads it for display and calls update_record_if_higher exactly
    once when a session ends.
    """

    @abstractmethod
    def load_record_score(self) -> int:
        """
        Returns:
            The stored record, 0 if none has been saved yet
        """
        pass

    @abstractmethod
    def update_record_if_higher(self, score: int) -> bool:
        """
        Store `score` if it beats the current record.

        Args:
            score: Final score of a finished session

        Returns:
            True if a new record was stored
        """
        pass
