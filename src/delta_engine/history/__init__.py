"""Delta-chain history, checkpoint store, and editing sessions."""

from .delta_chain import DeltaChain
from .session import EditSession, Transaction
from .store import Checkpoint, CheckpointStore, FullSnapshot

__all__ = [
    "Checkpoint",
    "CheckpointStore",
    "DeltaChain",
    "EditSession",
    "FullSnapshot",
    "Transaction",
]
