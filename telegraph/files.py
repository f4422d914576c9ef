"""Two-phase file resolution: metadata lookup, then content download.

Both :meth:`GetFileCall.download` and :meth:`GetUserProfilePhotosCall.download`
end in the same :class:`GetContentCall`, so the final byte transfer fails the
same way however the path was obtained.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence, Union

from telegraph.calls import Call
from telegraph.envelope import CommitResult, describe_failure, is_success_status
from telegraph.exceptions import HTTPStatusError, NotFoundError
from telegraph.logger import TelegraphLogger
from telegraph.models import File, PhotoSize, UserProfilePhotos

if TYPE_CHECKING:
    from telegraph.client import TelegraphClient

_logger = TelegraphLogger.get_logger("files")


def select_photo_path(candidates: Sequence[Sequence[PhotoSize]]) -> Optional[str]:
    """Return the first non-empty ``file_path`` in row-major order.

    The outer index is the photo, the inner index its sizes.  The first size
    that actually holds a path wins, which is not necessarily the largest.
    """
    for sizes in candidates:
        for size in sizes:
            if size.file_path:
                return size.file_path
    return None


class GetContentCall(Call):
    """Downloads raw bytes from ``/file/bot<token>/<path>``.

    The file endpoint returns content rather than an envelope, so only the
    transport and HTTP status checks apply.
    """

    def __init__(self, client: "TelegraphClient", path: str) -> None:
        super().__init__(client, "getContent", bytes, url=client.content_endpoint(path))
        self.path = path

    def commit(self) -> CommitResult:
        """Fetch the file content.

        Returns:
            ``CommitResult(content_bytes, response)``.

        Raises:
            NotFoundError: *path* is empty; no request is sent.
            TransportError: No HTTP response was received.
            HTTPStatusError: The status code is outside the 2xx range.
        """
        if not self.path:
            raise NotFoundError("No file path to download")
        self._mark_committed()
        response = self._send()
        if not is_success_status(response.status_code):
            raise HTTPStatusError(response.status_code, describe_failure(response), response=response)
        return CommitResult(response.content, response)


class GetFileCall(Call):
    """``getFile`` -- resolves a ``file_id`` to :class:`~telegraph.models.File` metadata."""

    def __init__(self, client: "TelegraphClient", file_id: str) -> None:
        super().__init__(client, "getFile", File)
        self.params["file_id"] = file_id

    def download(self) -> CommitResult:
        """Resolve the file, then download its content.

        Raises:
            NotFoundError: The resolved file has no ``file_path``.
        """
        file, response = self.commit()
        if not file.file_path:
            raise NotFoundError(f"File {file.file_id} has no downloadable path", response=response)
        return self.client.get_content(file.file_path).commit()


class GetUserProfilePhotosCall(Call):
    """``getUserProfilePhotos`` -- lists a user's profile pictures."""

    def __init__(self, client: "TelegraphClient", user_id: Union[int, str]) -> None:
        super().__init__(client, "getUserProfilePhotos", UserProfilePhotos)
        self.params["user_id"] = user_id

    def limit(self, limit: int) -> "GetUserProfilePhotosCall":
        """Limits the number of photos to be retrieved (1-100)."""
        self.params["limit"] = limit
        return self

    def offset(self, offset: int) -> "GetUserProfilePhotosCall":
        """Sequential number of the first photo to be returned."""
        self.params["offset"] = offset
        return self

    def download(self) -> CommitResult:
        """Download the first profile photo size that carries a file path.

        Raises:
            NotFoundError: No candidate size has a ``file_path``.
        """
        photos, response = self.commit()
        path = select_photo_path(photos.photos)
        if path is None:
            _logger.debug("No downloadable profile photo", extra={"api_endpoint": self.operation, "total_count": photos.total_count})
            raise NotFoundError("No profile photo with a downloadable path", response=response)
        return self.client.get_content(path).commit()

