"""
Domain models — Pydantic types for dufflectl.

All models are re-exported here for convenient access:

    from dufflectl.core.models import BinaryInfo, Platform, Result
"""

from dufflectl.core.models.binary import BinaryInfo, Platform
from dufflectl.core.models.result import Result

__all__ = [
    # binary.py
    "BinaryInfo",
    "Platform",
    # result.py
    "Result",
]
