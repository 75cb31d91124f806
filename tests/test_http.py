from __future__ import annotations

import http.client as http_client
import io
from pathlib import Path
import ssl
import urllib.error
import urllib.request

import pytest

from lyxhebrew.core import http
from lyxhebrew.core.exceptions import DownloadError


def test_download_file_streams_to_destination(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(http, "open_url", lambda _url: io.BytesIO(b"archive-bytes"))

    target = http.download_file("https://example.invalid/culmus.tar.gz", tmp_path / "a" / "c.tgz")

    assert target.read_bytes() == b"archive-bytes"


def test_download_file_wraps_network_errors(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    def offline(_url: str) -> None:
        raise urllib.error.URLError("Name or service not known")

    monkeypatch.setattr(http, "open_url", offline)

    with pytest.raises(DownloadError, match="Unable to download"):
        http.download_file("https://example.invalid/culmus.tar.gz", tmp_path / "c.tgz")


def test_certificate_failures_carry_guidance(monkeypatch: pytest.MonkeyPatch) -> None:
    def reject(*_args: object, **_kwargs: object) -> None:
        raise urllib.error.URLError(ssl.SSLCertVerificationError("certificate verify failed"))

    monkeypatch.setattr(urllib.request, "urlopen", reject)

    with pytest.raises(http.TLSCertificateError, match="Install Certificates.command"):
        http.open_url("https://example.invalid/culmus.tar.gz")


def test_download_file_wraps_incomplete_reads(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    class _Truncated(io.BytesIO):
        def read(self, *_args: object) -> bytes:
            raise http_client.IncompleteRead(b"partial", 1024)

    monkeypatch.setattr(http, "open_url", lambda _url: _Truncated())

    with pytest.raises(DownloadError, match="Unable to download"):
        http.download_file("https://example.invalid/culmus.tar.gz", tmp_path / "c.tgz")
