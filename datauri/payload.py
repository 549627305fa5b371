# -*- coding: utf-8 -*-
#
# datauri, a decoder for RFC 2397 data URIs
#
# Copyright (C) 2025 The datauri Authors
#
# This program is free software; you can redistribute it and/or
# modify it under the terms of the GNU General Public License
# as published by the Free Software Foundation; either version 2
# of the License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA 02110-1301, USA.

from base64 import b64decode
import re
from urllib.parse import unquote_to_bytes


_WHITESPACE = re.compile(r'\s+', re.ASCII)
_NON_BASE64 = re.compile(rb'[^A-Za-z0-9+/]')
_URLSAFE_TO_STANDARD = bytes.maketrans(b'-_', b'+/')


def decode_payload(data: str, is_base64: bool) -> bytes:
    if is_base64:
        return base64_decode(data)
    return percent_decode(data)


def percent_decode(data: str) -> bytes:
    """Replace "%XX" escapes by the byte they name.

    All other characters map to a single byte. Malformed escapes are kept
    literally, so this never fails.
    """
    return unquote_to_bytes(_binary(data))


def base64_decode(data: str) -> bytes:
    """Decode base64 leniently.

    Line breaks and other whitespace are removed first, so wrapped payloads
    decode like unwrapped ones. Percent escapes (e.g. "%3D" for padding) are
    resolved, URL-safe characters are accepted, decoding stops at the first
    "=" and characters outside the base64 alphabet, non-ASCII ones included,
    are ignored. Missing padding is tolerated.
    """
    raw = unquote_to_bytes(_WHITESPACE.sub('', data).encode('ascii', 'ignore'))
    raw = raw.translate(_URLSAFE_TO_STANDARD).split(b'=', 1)[0]
    raw = _NON_BASE64.sub(b'', raw)
    if len(raw) % 4 == 1:
        # six dangling bits cannot form a byte
        raw = raw[:-1]
    return b64decode(raw + b'=' * (-len(raw) % 4))


def _binary(text: str) -> bytes:
    try:
        return text.encode('latin-1')
    except UnicodeEncodeError:
        return bytes(ord(char) & 0xFF for char in text)
