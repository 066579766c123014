"""Turn base64 data URIs into media records for the package."""
from __future__ import annotations

import hashlib
import re
import secrets
from typing import Tuple

from docx_writer.errors import InvalidMediaError
from docx_writer.model.parts import MediaFile

DATA_URI_PATTERN = re.compile(r"^data:([A-Za-z+/-]+);base64,(.+)\Z")
MIME_SUBTYPE_PATTERN = re.compile(r"/(.*?)$")

# Payloads of unknown type are stored as PNG.
EXTENSION_OVERRIDES = {"octet-stream": "png"}

_RANDOM_NAME_BYTES = 20


def parse_data_uri(data_uri: str) -> Tuple[str, str]:
    """Return ``(mime_type, base64_payload)`` or raise :class:`InvalidMediaError`."""
    matches = DATA_URI_PATTERN.match(data_uri) if isinstance(data_uri, str) else None
    if matches is None:
        raise InvalidMediaError(str(data_uri))
    return matches.group(1), matches.group(2)


def extension_for(mime_type: str) -> str:
    subtype = MIME_SUBTYPE_PATTERN.search(mime_type)
    if subtype is None or not subtype.group(1):
        raise InvalidMediaError(mime_type)
    return EXTENSION_OVERRIDES.get(subtype.group(1), subtype.group(1))


def random_file_name(extension: str) -> str:
    """Name an image after the SHA-1 of random bytes.

    Identical payloads therefore get distinct names and are never
    deduplicated inside the package.
    """
    digest = hashlib.sha1(secrets.token_bytes(_RANDOM_NAME_BYTES)).hexdigest()
    return f"image-{digest}.{extension}"


def build_media_file(media_id: int, data_uri: str) -> MediaFile:
    mime_type, payload = parse_data_uri(data_uri)
    return MediaFile(
        media_id=media_id,
        content=payload,
        file_name=random_file_name(extension_for(mime_type)),
        mime_type=mime_type,
    )
