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

from collections import namedtuple

from datauri.config import DecoderConfig
from datauri.errors import InvalidSchemeError


ResolvedMeta = namedtuple('ResolvedMeta', 'type type_full charset is_base64 parameters type_was_defaulted')


def split_uri(uri: str) -> tuple[str, str]:
    """Split a data URI into its meta segment and its data segment.

    Only the first comma separates the two; any later comma belongs to the
    data segment.
    """
    if not isinstance(uri, str):
        raise TypeError(f'Expected a str, got {type(uri).__name__}')
    prefix = DecoderConfig.SCHEME_PREFIX
    if uri[:len(prefix)].lower() != prefix:
        raise InvalidSchemeError(f'Expected URI to start with "{prefix}"')
    meta_segment, sep, data_segment = uri[len(prefix):].partition(',')
    if not sep:
        raise InvalidSchemeError('Expected a "," separating the media type from the data')
    return meta_segment, data_segment


def parse_meta(meta_segment: str) -> ResolvedMeta:
    """Resolve the media type, charset and base64 flag of a meta segment.

    Parameters
    ----------
    meta_segment
        Everything between "data:" and the first comma, e.g.
        "text/plain;charset=UTF-8;base64".
    """
    tokens = meta_segment.split(';')
    mediatype, type_was_defaulted = _resolve_type(tokens[0])

    charset = ''
    is_base64 = False
    parameters = []
    for token in tokens[1:]:
        if not token:
            continue
        if token.lower() == DecoderConfig.BASE64_MARKER:
            is_base64 = True
            continue
        parameters.append(token)
        if token.startswith(DecoderConfig.CHARSET_KEY):
            charset = token.split('=', 1)[1]

    type_full = ';'.join([mediatype] + parameters)
    if _default_charset_applies(meta_segment, charset):
        charset = DecoderConfig.DEFAULT_CHARSET
        type_full += ';' + DecoderConfig.CHARSET_KEY + charset

    return ResolvedMeta(mediatype, type_full, charset, is_base64, tuple(parameters), type_was_defaulted)


def _resolve_type(first_token: str) -> tuple[str, bool]:
    # The first token is the type whatever it looks like, "base64" and
    # "charset=..." included.
    if not first_token:
        return DecoderConfig.DEFAULT_TYPE, True
    return first_token, False


def _default_charset_applies(meta_segment: str, charset: str) -> bool:
    # Only a completely empty meta segment ("data:,...") gets US-ASCII, not
    # one that merely omits the type.
    return not meta_segment and not charset
