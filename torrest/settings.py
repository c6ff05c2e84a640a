"""Service settings: defaults, JSON persistence and validation."""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from enum import IntEnum
from pathlib import Path
from typing import Any

from .log import LogLevel
from .validation import gt, gte, lt, lte, not_empty, validate


class WriteMode(IntEnum):
    AUTO = 0
    PWRITE = 1
    MMAP_WRITE = 2
    FORCE_PREAD_PWRITE = 3


class EncryptionPolicy(IntEnum):
    ENABLED = 0
    DISABLED = 1
    FORCED = 2


class ProxyType(IntEnum):
    NONE = 0
    SOCKS4 = 1
    SOCKS5 = 2
    SOCKS5_PASSWORD = 3
    HTTP = 4
    HTTP_PASSWORD = 5
    I2PSAM = 6


def _coerce(name: str, default: Any, value: Any) -> Any:
    if isinstance(default, bool):
        if not isinstance(value, bool):
            raise TypeError(f"'{name}' must be a boolean")
        return value
    if isinstance(default, str):
        if not isinstance(value, str):
            raise TypeError(f"'{name}' must be a string")
        return value
    if not isinstance(value, (bool, int, float)):
        raise TypeError(f"'{name}' must be a number")
    number = int(value)
    if isinstance(default, IntEnum):
        try:
            return type(default)(number)
        except ValueError:
            return number
    return number


def _plain(value: Any) -> Any:
    if isinstance(value, ProxySettings):
        return value.to_dict()
    if isinstance(value, IntEnum):
        return int(value)
    return value


def _read_fields(cls: type, data: Any, skip: tuple[str, ...] = ()) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise TypeError(f"{cls.__name__} must be a JSON object")
    return {
        f.name: _coerce(f.name, f.default, data[f.name])
        for f in fields(cls)
        if f.name in data and f.name not in skip
    }


def _to_json(data: dict[str, Any]) -> str:
    return json.dumps(data, indent=4, sort_keys=True, ensure_ascii=False)


@dataclass
class ProxySettings:
    type: ProxyType = ProxyType.NONE
    port: int = 0
    hostname: str = ""
    username: str = ""
    password: str = ""

    def validate(self) -> None:
        validate("type", self.type, gte(0), lt(len(ProxyType)))
        if self.type == ProxyType.NONE:
            return
        validate("port", self.port, gte(0), lte(65535))
        validate("hostname", self.hostname, not_empty())
        if self.type == ProxyType.SOCKS4:
            validate("username", self.username, not_empty())
        elif self.type in (ProxyType.SOCKS5_PASSWORD, ProxyType.HTTP_PASSWORD):
            validate("username", self.username, not_empty())
            validate("password", self.password, not_empty())

    def to_dict(self) -> dict[str, Any]:
        return {f.name: _plain(getattr(self, f.name)) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Any) -> "ProxySettings":
        return cls(**_read_fields(cls, data))


@dataclass
class Settings:
    listen_port: int = 6889
    listen_interfaces: str = ""
    outgoing_interfaces: str = ""
    disable_dht: bool = False
    disable_upnp: bool = False
    disable_natpmp: bool = False
    disable_lsd: bool = False
    download_path: str = "downloads"
    torrents_path: str = "downloads/torrents"
    user_agent: str = ""
    session_save: int = 30
    tuned_storage: bool = False
    check_available_space: bool = True
    connections_limit: int = 0
    limit_after_buffering: bool = False
    max_download_rate: int = 0
    max_upload_rate: int = 0
    share_ratio_limit: int = 0
    seed_time_ratio_limit: int = 0
    seed_time_limit: int = 0
    active_downloads_limit: int = 3
    active_seeds_limit: int = 5
    active_checking_limit: int = 1
    active_dht_limit: int = 88
    active_tracker_limit: int = 1600
    active_lsd_limit: int = 60
    active_limit: int = 500
    write_mode: WriteMode = WriteMode.AUTO
    encryption_policy: EncryptionPolicy = EncryptionPolicy.ENABLED
    proxy: ProxySettings | None = None
    buffer_size: int = 20 * 1024 * 1024
    piece_wait_timeout: int = 60
    piece_expiration: int = 5
    service_log_level: LogLevel = LogLevel.INFO
    alerts_log_level: LogLevel = LogLevel.CRITICAL
    api_log_level: LogLevel = LogLevel.ERR

    @classmethod
    def load(cls, path: str | Path) -> "Settings":
        return cls.parse(Path(path).read_text(encoding="utf-8"))

    @classmethod
    def parse(cls, text: str) -> "Settings":
        return cls.from_dict(json.loads(text))

    def save(self, path: str | Path) -> None:
        Path(path).write_text(self.dump() + "\n", encoding="utf-8")

    def dump(self) -> str:
        return _to_json(self.to_dict())

    def validate(self) -> None:
        validate("listen_port", self.listen_port, gte(0), lte(65535))
        validate("download_path", self.download_path, not_empty())
        validate("torrents_path", self.torrents_path, not_empty())
        validate("session_save", self.session_save, gt(0))
        validate("max_download_rate", self.max_download_rate, gte(0))
        validate("max_upload_rate", self.max_upload_rate, gte(0))
        validate("share_ratio_limit", self.share_ratio_limit, gte(0))
        validate("seed_time_ratio_limit", self.seed_time_ratio_limit, gte(0))
        validate("seed_time_limit", self.seed_time_limit, gte(0))
        validate("write_mode", self.write_mode, gte(0), lt(len(WriteMode)))
        validate("encryption_policy", self.encryption_policy, gte(0), lt(len(EncryptionPolicy)))
        validate("piece_wait_timeout", self.piece_wait_timeout, gte(0))
        validate("piece_expiration", self.piece_expiration, gt(0))
        levels = len(LogLevel)
        validate("service_log_level", self.service_log_level, gte(0), lt(levels))
        validate("alerts_log_level", self.alerts_log_level, gte(0), lt(levels))
        validate("api_log_level", self.api_log_level, gte(0), lt(levels))
        if self.proxy is not None:
            self.proxy.validate()

    def to_dict(self) -> dict[str, Any]:
        return {f.name: _plain(getattr(self, f.name)) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Any) -> "Settings":
        values = _read_fields(cls, data, skip=("proxy",))
        if "proxy" in data:
            proxy = data["proxy"]
            values["proxy"] = None if proxy is None else ProxySettings.from_dict(proxy)
        return cls(**values)