"""Unit tests for S3UploadStore using moto."""

from __future__ import annotations

import boto3
import pytest
from moto import mock_aws

from rosterimport.core.exceptions import RosterImportError
from rosterimport.ingest.encoding import resolve_text
from rosterimport.persistence.s3_backend import S3UploadStore

BUCKET = "test-uploads"


@pytest.fixture
def s3():
    with mock_aws():
        client = boto3.client("s3", region_name="us-east-1")
        client.create_bucket(Bucket=BUCKET)
        yield client, S3UploadStore(bucket=BUCKET, region="us-east-1")


class TestOpen:
    def test_open_returns_named_handle(self, s3):
        client, store = s3
        client.put_object(Bucket=BUCKET, Key="org-1/exports/roster.csv", Body=b"a,b\n1,2\n")
        upload = store.open("org-1/exports/roster.csv")
        assert upload.name == "roster.csv"
        assert upload.read() == b"a,b\n1,2\n"

    def test_open_feeds_encoding_resolver(self, s3):
        client, store = s3
        client.put_object(Bucket=BUCKET, Key="legacy.csv", Body="Nom\nRené\n".encode("cp1252"))
        assert resolve_text(store.open("legacy.csv")) == "Nom\nRené\n"

    def test_missing_key_raises(self, s3):
        _, store = s3
        with pytest.raises(RosterImportError):
            store.open("does/not/exist.csv")


class TestListUploads:
    def test_lists_only_csv_under_prefix(self, s3):
        client, store = s3
        client.put_object(Bucket=BUCKET, Key="in/a.csv", Body=b"1")
        client.put_object(Bucket=BUCKET, Key="in/b.xlsx", Body=b"2")
        client.put_object(Bucket=BUCKET, Key="other/c.csv", Body=b"3")
        assert store.list_uploads("in/") == ["in/a.csv"]

    def test_empty_prefix_returns_nothing(self, s3):
        _, store = s3
        assert store.list_uploads("nonexistent/") == []
