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

from __future__ import annotations

from base64 import b64encode
import codecs
from dataclasses import dataclass

from datauri import log
from datauri.config import DecoderConfig


@dataclass(frozen=True)
class DecodedBuffer:
    """Bytes decoded from a data URI together with their media type.

    Supports the read-only sequence protocol of the underlying bytes:
    ``len(buf)``, ``buf[0]``, slicing, iteration and ``bytes(buf)``.

    Attributes
    ----------
    type
        Primary media type, e.g. "text/plain".
    type_full
        Media type including all parameters except the base64 marker.
    charset
        Value of the charset parameter, or an empty string.
    encoding
        Payload encoding, either "base64" or "urlencoded".
    data
        The decoded bytes.
    """

    type: str
    type_full: str
    charset: str
    encoding: str
    data: bytes

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index):
        return self.data[index]

    def __iter__(self):
        return iter(self.data)

    def __contains__(self, item) -> bool:
        return item in self.data

    def __bytes__(self) -> bytes:
        return self.data

    def text(self, encoding: str | None = None, errors: str | None = None) -> str:
        """Return the bytes decoded as text.

        Parameters
        ----------
        encoding
            Codec to decode with. Defaults to the resolved charset, or UTF-8
            if there is none or Python does not know it.
        errors
            Error handling scheme as accepted by `bytes.decode`. Defaults to
            "replace" when decoding with the resolved charset, otherwise to
            "strict".
        """
        if encoding is None:
            encoding = self._text_encoding()
            if errors is None:
                errors = 'replace'
        elif errors is None:
            errors = 'strict'
        return self.data.decode(encoding, errors)

    def to_base64(self) -> str:
        return b64encode(self.data).decode('ascii')

    def _text_encoding(self) -> str:
        if not self.charset:
            return DecoderConfig.FALLBACK_TEXT_ENCODING
        label = self.charset.strip().lower()
        label = DecoderConfig.CHARSET_LABEL_ALIASES.get(label, label)
        try:
            return codecs.lookup(label).name
        except LookupError:
            log.warning('Unknown charset %r, decoding as %s', self.charset, DecoderConfig.FALLBACK_TEXT_ENCODING)
            return DecoderConfig.FALLBACK_TEXT_ENCODING
