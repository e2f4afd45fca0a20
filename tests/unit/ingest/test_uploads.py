"""Tests for upload handles."""

from __future__ import annotations

from rosterimport.core.protocols import IUploadedFile
from rosterimport.ingest.uploads import InMemoryUpload, LocalUpload, has_extension


def test_local_upload_reads_file(tmp_path):
    path = tmp_path / "roster.csv"
    path.write_bytes(b"a,b\n1,2\n")
    upload = LocalUpload(path)
    assert upload.name == "roster.csv"
    assert upload.read() == b"a,b\n1,2\n"


def test_handles_satisfy_protocol(tmp_path):
    assert isinstance(InMemoryUpload("x.csv", b""), IUploadedFile)
    assert isinstance(LocalUpload(tmp_path / "x.csv"), IUploadedFile)


def test_extension_check_is_case_sensitive():
    assert has_extension("roster.csv", ".csv")
    assert not has_extension("roster.CSV", ".csv")
    assert not has_extension("roster.xlsx", ".csv")
