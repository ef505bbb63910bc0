"""Storage service.

File operations within buckets. Uploads go through the client's chunked
upload, so files larger than the configured chunk size are sent in
``content-range`` slices.
"""
import logging
from typing import List, Optional

from ..enums import ImageFormat, ImageGravity
from ..helpers import compact, require_params
from ..models import File, FileList, InputFile, ProgressCallback
from ..types import RESPONSE_ARRAY_BUFFER
from ._base import JSON_HEADERS, MULTIPART_HEADERS, Service

log = logging.getLogger(__name__)


class Storage(Service):
    """Service for files in storage buckets."""

    async def list_files(self, bucket_id: str, queries: Optional[List[str]] = None,
                         search: Optional[str] = None) -> FileList:
        require_params(bucketId=bucket_id)
        params = compact({"queries": queries, "search": search})
        return FileList.from_dict(await self._client.call("GET", f"/storage/buckets/{bucket_id}/files", params=params))

    async def create_file(self, bucket_id: str, file_id: str, file: InputFile,
                          permissions: Optional[List[str]] = None,
                          on_progress: Optional[ProgressCallback] = None) -> File:
        """Upload a file.

        Args:
            bucket_id: Bucket to upload into
            file_id: Id of the new file, e.g. ``ID.unique()``
            file: Content to upload
            permissions: Permission strings, see ``Permission``
            on_progress: Receives an UploadProgress after every chunk

        Returns:
            The stored File
        """
        require_params(bucketId=bucket_id, fileId=file_id, file=file)
        log.info(f"Creating file '{file.name}' in bucket {bucket_id}")
        payload = compact({"fileId": file_id, "file": file, "permissions": permissions})
        data = await self._client.chunked_upload("POST", f"/storage/buckets/{bucket_id}/files", MULTIPART_HEADERS,
                                                 payload, on_progress)
        return File.from_dict(data)

    async def get_file(self, bucket_id: str, file_id: str) -> File:
        require_params(bucketId=bucket_id, fileId=file_id)
        return File.from_dict(await self._client.call("GET", f"/storage/buckets/{bucket_id}/files/{file_id}"))

    async def update_file(self, bucket_id: str, file_id: str, name: Optional[str] = None,
                          permissions: Optional[List[str]] = None) -> File:
        """Rename a file or replace its permissions."""
        require_params(bucketId=bucket_id, fileId=file_id)
        payload = compact({"name": name, "permissions": permissions})
        data = await self._client.call("PUT", f"/storage/buckets/{bucket_id}/files/{file_id}", JSON_HEADERS, payload)
        return File.from_dict(data)

    async def delete_file(self, bucket_id: str, file_id: str) -> None:
        require_params(bucketId=bucket_id, fileId=file_id)
        await self._client.call("DELETE", f"/storage/buckets/{bucket_id}/files/{file_id}", JSON_HEADERS)

    async def download_file(self, bucket_id: str, file_id: str) -> bytes:
        """Fetch the content of a file."""
        require_params(bucketId=bucket_id, fileId=file_id)
        return await self._client.call("GET", f"/storage/buckets/{bucket_id}/files/{file_id}/download",
                                       response_type=RESPONSE_ARRAY_BUFFER)

    # -------------------------
    # URL builders
    # -------------------------
    def get_file_download(self, bucket_id: str, file_id: str) -> str:
        """URL that downloads the file as an attachment."""
        require_params(bucketId=bucket_id, fileId=file_id)
        return self._client.build_url(f"/storage/buckets/{bucket_id}/files/{file_id}/download")

    def get_file_view(self, bucket_id: str, file_id: str) -> str:
        """URL that serves the file inline."""
        require_params(bucketId=bucket_id, fileId=file_id)
        return self._client.build_url(f"/storage/buckets/{bucket_id}/files/{file_id}/view")

    def get_file_preview(self, bucket_id: str, file_id: str, width: Optional[int] = None,
                         height: Optional[int] = None, gravity: Optional[str] = None,
                         quality: Optional[int] = None, border_width: Optional[int] = None,
                         border_color: Optional[str] = None, border_radius: Optional[int] = None,
                         opacity: Optional[float] = None, rotation: Optional[int] = None,
                         background: Optional[str] = None, output: Optional[str] = None) -> str:
        """URL of an image preview, resized and cropped by the server.

        Raises:
            InvalidValueError: If gravity is not an ImageGravity or output not an ImageFormat
        """
        require_params(bucketId=bucket_id, fileId=file_id)
        if gravity is not None:
            ImageGravity.validate_strict(gravity)
        if output is not None:
            ImageFormat.validate_strict(output)
        params = compact({
            "width": width,
            "height": height,
            "gravity": gravity,
            "quality": quality,
            "borderWidth": border_width,
            "borderColor": border_color,
            "borderRadius": border_radius,
            "opacity": opacity,
            "rotation": rotation,
            "background": background,
            "output": output,
        })
        return self._client.build_url(f"/storage/buckets/{bucket_id}/files/{file_id}/preview", params)
