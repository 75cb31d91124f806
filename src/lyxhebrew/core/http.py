"""HTTP helpers with TLS guidance for downloads."""

from __future__ import annotations

from collections.abc import Mapping
import http.client
import logging
from pathlib import Path
import shutil
import ssl
from typing import Any
import urllib.error
import urllib.request

import certifi

from .exceptions import DownloadError


logger = logging.getLogger(__name__)


class TLSCertificateError(DownloadError):
    """Raised when TLS certificate verification fails during downloads."""


def _tls_help(url: str) -> str:
    return (
        "TLS certificate verification failed while downloading "
        f"'{url}'. Run the Python 'Install Certificates.command' (from the "
        "python.org installer) or 'python3 -m pip install --upgrade certifi'. "
        "Also check system date/time and any proxy or corporate SSL inspection."
    )


def _ssl_context() -> ssl.SSLContext:
    return ssl.create_default_context(cafile=certifi.where())


def _is_cert_error(error: urllib.error.URLError) -> bool:
    reason = getattr(error, "reason", None)
    return isinstance(reason, ssl.SSLCertVerificationError)


def open_url(
    url: str | urllib.request.Request,
    *,
    headers: Mapping[str, str] | None = None,
) -> Any:
    """Open a URL with a default SSL context and cert guidance on failure.

    Redirects are followed, which SourceForge download links rely on.
    """
    request = url
    if isinstance(url, str):
        request = urllib.request.Request(url, headers=dict(headers or {}))
    try:
        return urllib.request.urlopen(request, context=_ssl_context())
    except urllib.error.URLError as exc:
        if _is_cert_error(exc):
            raise TLSCertificateError(_tls_help(str(getattr(request, "full_url", url)))) from exc
        raise


def download_file(url: str, destination: Path) -> Path:
    """Stream ``url`` into ``destination`` and return the written path."""
    logger.info("Downloading %s", url)
    destination.parent.mkdir(parents=True, exist_ok=True)
    try:
        with open_url(url) as response, destination.open("wb") as handle:
            shutil.copyfileobj(response, handle)
    except DownloadError:
        raise
    except (OSError, http.client.HTTPException, urllib.error.URLError) as exc:
        raise DownloadError(f"Unable to download '{url}': {exc}") from exc
    return destination


__all__ = ["TLSCertificateError", "download_file", "open_url"]
