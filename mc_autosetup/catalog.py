from __future__ import annotations
from typing import List, Optional
from urllib.parse import urlparse
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from .errors import NetworkError
from .http import get_json
from .logging_setup import get_logger
from .settings import Settings

log = get_logger("mc.autosetup.catalog")


class Latest(BaseModel):
    release: str
    snapshot: str = ""

class VersionEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    url: str = Field(..., description="Per-version metadata document")

class VersionCatalog(BaseModel):
    latest: Latest
    versions: List[VersionEntry] = Field(default_factory=list)

    def find(self, version_id: str) -> Optional[VersionEntry]:
        for entry in self.versions:
            if entry.id == version_id:
                return entry
        return None

class ServerDownload(BaseModel):
    url: str

class Downloads(BaseModel):
    server: ServerDownload

class VersionMetadata(BaseModel):
    downloads: Downloads


class ArtifactDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    download_url: str
    file_name: str

    @classmethod
    def from_url(cls, url: str) -> "ArtifactDescriptor":
        return cls(download_url=url, file_name=artifact_file_name(url))


def artifact_file_name(url: str) -> str:
    """7th '/'-separated segment of the URL; the final path segment when the
    URL is deeper than that."""
    parts = url.split("/")
    if len(parts) > 7:
        name = urlparse(url).path.rsplit("/", 1)[-1]
    elif len(parts) == 7:
        name = parts[6]
    else:
        name = ""
    if not name:
        raise NetworkError(f"Cannot derive a file name from {url}", url=url)
    return name


class CatalogClient:
    def __init__(self, settings: Settings):
        self.settings = settings

    def fetch(self) -> VersionCatalog:
        data = get_json(self.settings.catalog_url, timeout=self.settings.http_timeout)
        try:
            catalog = VersionCatalog.model_validate(data)
        except ValidationError as e:
            raise NetworkError(f"Malformed version catalog: {e}", url=self.settings.catalog_url) from e
        log.debug("Catalog: latest=%s, %d versions", catalog.latest.release, len(catalog.versions))
        return catalog

    def latest_release(self) -> str:
        return self.fetch().latest.release

    def fetch_metadata(self, entry: VersionEntry) -> VersionMetadata:
        log.debug("url=%s", entry.url)
        data = get_json(entry.url, timeout=self.settings.http_timeout)
        try:
            return VersionMetadata.model_validate(data)
        except ValidationError as e:
            raise NetworkError(f"Malformed metadata for {entry.id}: {e}", url=entry.url) from e
