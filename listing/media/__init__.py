"""
Media — image/video constraints for step 2.

The core never sees file bodies; it checks count, type and size and keeps
local preview references until the upload collaborator reports URLs.
"""

from __future__ import annotations

from listing.media._types import PickedFile, MediaErrorKind, MediaError, MediaBatch
from listing.media._ops import (
    check_file,
    add_media,
    remove_media,
    pending_uploads,
    mark_uploaded,
)

__all__ = (
    "PickedFile",
    "MediaErrorKind",
    "MediaError",
    "MediaBatch",
    "check_file",
    "add_media",
    "remove_media",
    "pending_uploads",
    "mark_uploaded",
)
