from __future__ import annotations
from pathlib import Path
from typing import Literal, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

CATALOG_URL = "https://launchermeta.mojang.com/mc/game/version_manifest_v2.json"
FABRIC_INSTALLER_URL = (
    "https://maven.fabricmc.net/net/fabricmc/fabric-installer/0.11.0/fabric-installer-0.11.0.jar"
)

class Settings(BaseSettings):
    base_dir: Path = Field(default=Path("."), alias="MC_BASE_DIR")
    fallback_folder: str = Field(default="minecraft_server", alias="MC_FALLBACK_FOLDER")

    java_bin: str = Field(default="java", alias="MC_JAVA_BIN")
    xms: str = Field(default="1G", alias="MC_XMS")
    xmx: str = Field(default="2G", alias="MC_XMX")

    catalog_url: str = Field(default=CATALOG_URL, alias="MC_CATALOG_URL")
    fabric_installer_url: str = Field(default=FABRIC_INSTALLER_URL, alias="MC_FABRIC_INSTALLER_URL")
    http_timeout: float = Field(default=60.0, alias="MC_HTTP_TIMEOUT")

    management_package: str = Field(default="mcdreforged", alias="MC_MANAGEMENT_PACKAGE")
    management_subdir: str = Field(default="server", alias="MC_MANAGEMENT_SUBDIR")
    patch_mode: Literal["key", "line"] = Field(default="key", alias="MC_PATCH_MODE")

    process_timeout: Optional[float] = Field(default=1800.0, alias="MC_PROCESS_TIMEOUT")
    first_boot_timeout: Optional[float] = Field(default=900.0, alias="MC_FIRST_BOOT_TIMEOUT")

    log_level: str = Field(default="INFO", alias="MC_LOG_LEVEL")
    log_json: bool = Field(default=False, alias="MC_LOG_JSON")
    log_file: Optional[Path] = Field(default=None, alias="MC_LOG_FILE")

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)
