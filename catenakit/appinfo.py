"""The application information block embedded in firmware images."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

MAGIC = ord("M") | (ord("A") << 8) | (ord("P") << 16) | (ord("0") << 24)
FILE_INDEX = 48 * 4
MAX_AUTH_SIZE = 0x400

PUBLIC_KEY_SIZE = 32
HASH_SIZE = 512 // 8
SIGNATURE_SIZE = 64

_LAYOUT = struct.Struct("<6IQ16s16s")
APP_INFO_SIZE = _LAYOUT.size


@dataclass
class AppInfo:
    """Describes an application image and where its authentication data lives."""

    target_address: int = 0
    image_size: int = 0
    auth_size: int = 0
    version: int = 0
    posix_timestamp: int = 0
    comment: bytes = field(default=bytes(16))
    reserved: bytes = field(default=bytes(16))
    magic: int = MAGIC
    size: int = APP_INFO_SIZE

    def to_bytes(self) -> bytes:
        """Serialize to the little-endian on-image layout."""
        if len(self.comment) > 16:
            raise ValueError("comment is longer than 16 bytes")
        if len(self.reserved) > 16:
            raise ValueError("reserved area is longer than 16 bytes")
        try:
            return _LAYOUT.pack(
                self.magic,
                self.size,
                self.target_address,
                self.image_size,
                self.auth_size,
                self.version,
                self.posix_timestamp,
                self.comment,
                self.reserved,
            )
        except struct.error as exc:
            raise ValueError(f"field out of range: {exc}") from exc

    def total_size(self) -> int:
        """Image size plus authentication data size."""
        return self.image_size + self.auth_size

    def public_key_address(self) -> int:
        return self.target_address + self.image_size

    def hash_address(self) -> int:
        return self.public_key_address() + PUBLIC_KEY_SIZE

    def signature_address(self) -> int:
        return self.hash_address() + HASH_SIZE


def parse_app_info(data: bytes) -> AppInfo:
    """Decode an application information block from the start of data."""
    if len(data) < APP_INFO_SIZE:
        raise ValueError(
            f"need {APP_INFO_SIZE} bytes for an app info block, got {len(data)}"
        )
    (
        magic,
        size,
        target_address,
        image_size,
        auth_size,
        version,
        timestamp,
        comment,
        reserved,
    ) = _LAYOUT.unpack_from(data)
    if magic != MAGIC:
        raise ValueError(f"bad app info magic 0x{magic:08x}")
    return AppInfo(
        target_address=target_address,
        image_size=image_size,
        auth_size=auth_size,
        version=version,
        posix_timestamp=timestamp,
        comment=comment,
        reserved=reserved,
        magic=magic,
        size=size,
    )