"""Record models shared across the package."""

from .records import AccessToken, RecordId, RecordType, UserRecord

__all__ = ["AccessToken", "RecordId", "RecordType", "UserRecord"]
