"""S3 upload store: opens uploaded CSV objects as IUploadedFile handles."""

from __future__ import annotations

import posixpath

import boto3
from botocore.exceptions import ClientError

from rosterimport.core.exceptions import RosterImportError
from rosterimport.ingest.uploads import InMemoryUpload


class S3UploadStore:
    """Reads uploads that the host application dropped into a bucket."""

    def __init__(self, bucket: str, region: str = "us-east-1",
                 endpoint_url: str | None = None) -> None:
        self._bucket = bucket
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._client = boto3.client("s3", **kwargs)

    def open(self, key: str) -> InMemoryUpload:
        """Fetch an object; the handle's name is the key's basename."""
        try:
            resp = self._client.get_object(Bucket=self._bucket, Key=key)
            data = resp["Body"].read()
        except ClientError as exc:
            raise RosterImportError(f"S3 read failed for {key!r}: {exc}") from exc
        return InMemoryUpload(posixpath.basename(key), data)

    def list_uploads(self, prefix: str, extension: str = ".csv") -> list[str]:
        try:
            keys: list[str] = []
            paginator = self._client.get_paginator("list_objects_v2")
            for page in paginator.paginate(Bucket=self._bucket, Prefix=prefix):
                for obj in page.get("Contents", []):
                    if obj["Key"].endswith(extension):
                        keys.append(obj["Key"])
            return keys
        except ClientError as exc:
            raise RosterImportError(f"S3 list failed for prefix={prefix!r}: {exc}") from exc
