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


class DecoderConfig:
    """Constants of the data URI grammar.

    Attributes
    ----------
    SCHEME_PREFIX
        Prefix every data URI starts with. Compared case-insensitively.
    DEFAULT_TYPE
        Media type used when the URI names none.
    DEFAULT_CHARSET
        Charset forced when the URI carries no meta content at all.
    BASE64_MARKER
        Parameter token selecting the base64 payload encoding.
    CHARSET_KEY
        Prefix of the charset parameter, including the separator.
    FALLBACK_TEXT_ENCODING
        Encoding used for text views when no usable charset is known.
    CHARSET_LABEL_ALIASES
        Charset labels Python has no codec for, mapped to an equivalent one.
    """

    SCHEME_PREFIX: str = 'data:'
    DEFAULT_TYPE: str = 'text/plain'
    DEFAULT_CHARSET: str = 'US-ASCII'
    BASE64_MARKER: str = 'base64'
    CHARSET_KEY: str = 'charset='
    FALLBACK_TEXT_ENCODING: str = 'utf-8'
    CHARSET_LABEL_ALIASES: dict[str, str] = {
        'iso-8859-6-e': 'iso-8859-6',
        'iso-8859-6-i': 'iso-8859-6',
        'iso-8859-8-e': 'iso-8859-8',
        'iso-8859-8-i': 'iso-8859-8',
    }
