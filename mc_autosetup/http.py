from __future__ import annotations
import http.client
import json
import shutil
import urllib.error
import urllib.request
from pathlib import Path
from typing import Any
from .errors import NetworkError
from .logging_setup import get_logger

log = get_logger("mc.autosetup.http")

USER_AGENT = "mc-autosetup/0.3"

# URLError and socket timeouts are both OSError subclasses
TRANSPORT_ERRORS = (urllib.error.URLError, OSError, http.client.HTTPException)

def _open(url: str, timeout: float):
    req = urllib.request.Request(url, headers={"User-Agent": USER_AGENT})
    return urllib.request.urlopen(req, timeout=timeout)

def get_json(url: str, *, timeout: float = 60.0) -> Any:
    log.debug("GET %s", url)
    try:
        with _open(url, timeout) as resp:
            body = resp.read()
    except TRANSPORT_ERRORS as e:
        raise NetworkError(f"Request to {url} failed: {e}", url=url) from e
    try:
        return json.loads(body.decode("utf-8"))
    except ValueError as e:
        raise NetworkError(f"Malformed JSON from {url}: {e}", url=url) from e

def download(url: str, dest: Path, *, timeout: float = 60.0) -> Path:
    log.debug("Downloading %s -> %s", url, dest)
    try:
        fh = open(dest, "wb")
    except OSError as e:
        raise NetworkError(f"Could not write {dest}: {e}", url=url) from e
    with fh:
        try:
            with _open(url, timeout) as resp:
                shutil.copyfileobj(resp, fh)
        except TRANSPORT_ERRORS as e:
            raise NetworkError(f"Download of {url} failed: {e}", url=url) from e
    return dest
