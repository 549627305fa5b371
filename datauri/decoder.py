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

from datauri import log
from datauri.buffer import DecodedBuffer
from datauri.meta import (
    parse_meta,
    split_uri,
)
from datauri.payload import decode_payload


def decode(uri: str) -> DecodedBuffer:
    """Decode a data URI as defined in RFC 2397.

    See https://datatracker.ietf.org/doc/html/rfc2397

    Raises `InvalidSchemeError` if the URI does not start with "data:" or has
    no comma. Malformed metadata or payloads are decoded as far as possible.
    """
    meta_segment, data_segment = split_uri(uri)
    meta = parse_meta(meta_segment)
    encoding = 'base64' if meta.is_base64 else 'urlencoded'
    data = decode_payload(data_segment, meta.is_base64)
    log.debug('Decoded %s data URI of type %s (%d bytes)', encoding, meta.type_full, len(data))
    return DecodedBuffer(meta.type, meta.type_full, meta.charset, encoding, data)
