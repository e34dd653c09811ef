# kedia/outputs/base.py
from abc import ABC, abstractmethod

class BaseOutput(ABC):
    @abstractmethod
    def write(self, transactions, path=None):
        """Write ledger transactions to the chosen sink; return how many were written."""
        pass
