"""Storage Proof Toolkit - circuit parameters for Ethereum storage proofs."""

__version__ = "1.0.0"

from .proofs import ParamsMode, StorageProofParams

__all__ = ["ParamsMode", "StorageProofParams"]
