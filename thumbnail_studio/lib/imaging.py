# thumbnail_studio/lib/imaging.py
from __future__ import annotations
import base64
import binascii
import ipaddress
import re
import socket
from io import BytesIO
from typing import Optional
from urllib.parse import urlsplit

import requests
from PIL import Image

from thumbnail_studio.config import config
from thumbnail_studio.logger import get_logger

log = get_logger(__name__)

_DATAURL_RE = re.compile(r"^data:(?P<mime>[\w/+.-]+)?(?:;[\w=.-]+)*;base64,(?P<b64>.+)$", re.IGNORECASE | re.DOTALL)


def _is_remote_url(s: str) -> bool:
    return s.startswith("http://") or s.startswith("https://")


def as_image_url(image: str) -> str:
    """
    Normalize an image reference for a multimodal message part:
    - data URLs and http(s) URLs pass through
    - anything else is treated as raw base64 PNG
    """
    s = image.strip()
    if s.startswith("data:") or _is_remote_url(s):
        return s
    return f"data:image/png;base64,{s}"


def decode_data_url(data_url: str) -> bytes:
    m = _DATAURL_RE.match(data_url.strip())
    if not m:
        raise ValueError("not a base64 data URL")
    b64 = "".join(m.group("b64").split())
    missing_padding = (-len(b64)) % 4
    if missing_padding:
        b64 += "=" * missing_padding
    try:
        return base64.b64decode(b64)
    except binascii.Error as e:
        raise ValueError(f"invalid base64 payload: {e}") from e


def _require_public_host(url: str) -> None:
    """Refuse URLs whose host resolves to a loopback, private, link-local or reserved address."""
    host = urlsplit(url).hostname
    if not host:
        raise ValueError(f"no host in image URL: {url!r}")
    try:
        infos = socket.getaddrinfo(host, None)
    except socket.gaierror as e:
        raise ValueError(f"cannot resolve image host {host!r}: {e}") from e
    for info in infos:
        addr = ipaddress.ip_address(info[4][0].split("%", 1)[0])
        if addr.version == 6 and addr.ipv4_mapped:
            addr = addr.ipv4_mapped
        if not addr.is_global or addr.is_multicast:
            raise ValueError(f"refusing to fetch image from non-public address {addr} ({host})")


def fetch_image_bytes(url: str, *, timeout: float = 20.0, max_bytes: Optional[int] = None) -> bytes:
    """
    Download a remote image for server-side compositing.
    Only public hosts, no redirects, and at most ``max_bytes`` are read.
    """
    limit = max_bytes if max_bytes is not None else config.preview_max_image_bytes
    _require_public_host(url)
    with requests.get(url, timeout=timeout, stream=True, allow_redirects=False) as r:
        if r.is_redirect:
            raise ValueError(f"image URL redirects elsewhere: {url}")
        r.raise_for_status()
        buf = bytearray()
        for chunk in r.iter_content(chunk_size=64 * 1024):
            buf.extend(chunk)
            if len(buf) > limit:
                raise ValueError(f"image at {url} exceeds {limit} bytes")
    return bytes(buf)


def load_image(source: str, *, timeout: float = 20.0) -> Image.Image:
    """
    Load an image from a data URL, an http(s) URL or raw base64.
    Returns a fully loaded RGBA image (no open file handles left behind).
    """
    if _is_remote_url(source):
        data = fetch_image_bytes(source, timeout=timeout)
    else:
        data = decode_data_url(as_image_url(source))

    with Image.open(BytesIO(data)) as im:
        im.load()
        return im.convert("RGBA")


def encode_png_data_url(image: Image.Image) -> str:
    buf = BytesIO()
    image.save(buf, format="PNG")
    return "data:image/png;base64," + base64.b64encode(buf.getvalue()).decode("ascii")
