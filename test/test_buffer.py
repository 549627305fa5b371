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

from dataclasses import FrozenInstanceError
import logging

import pytest

from datauri.buffer import DecodedBuffer


@pytest.fixture
def buffer() -> DecodedBuffer:
    return DecodedBuffer('text/plain', 'text/plain;charset=UTF-8', 'UTF-8', 'urlencoded', 'שלום'.encode('utf-8'))


def test_sequence_protocol(buffer: DecodedBuffer) -> None:
    assert len(buffer) == 8
    assert buffer[0] == 0xd7
    assert buffer[-1] == 0x9d
    assert buffer[:2] == b'\xd7\xa9'
    assert list(buffer) == list('שלום'.encode('utf-8'))
    assert bytes(buffer) == 'שלום'.encode('utf-8')
    assert 0xd7 in buffer


def test_is_immutable(buffer: DecodedBuffer) -> None:
    with pytest.raises(FrozenInstanceError):
        buffer.charset = 'latin-1'


def test_text_uses_resolved_charset(buffer: DecodedBuffer) -> None:
    assert buffer.text() == 'שלום'


def test_text_with_explicit_encoding(buffer: DecodedBuffer) -> None:
    assert buffer.text('latin-1') == 'שלום'.encode('utf-8').decode('latin-1')


def test_text_with_unknown_explicit_encoding(buffer: DecodedBuffer) -> None:
    with pytest.raises(LookupError):
        buffer.text('no-such-codec')


def test_text_errors_argument() -> None:
    buffer = DecodedBuffer('text/plain', 'text/plain', '', 'urlencoded', b'a\xffb')
    assert buffer.text(errors='ignore') == 'ab'
    with pytest.raises(UnicodeDecodeError):
        buffer.text(errors='strict')


@pytest.mark.parametrize(
    ("charset", "data", "expected"),
    [
        ('', b'abc', 'abc'),
        ('US-ASCII', b'Hello', 'Hello'),
        ('iso-8859-8', b'\xf9\xec\xe5\xed', 'שלום'),
        ('utf-8', 'ü'.encode('utf-8'), 'ü'),
        ('iso-8859-8-i', b'\xf9\xec\xe5\xed', 'שלום'),
        ('ISO-8859-8-I', b'\xf9\xec', 'של'),
        ('US-ASCII', b'a\xffb', 'a\ufffdb'),
        ('', b'a\xffb', 'a\ufffdb'),
    ],
)
def test_text_charset_matrix(charset: str, data: bytes, expected: str) -> None:
    buffer = DecodedBuffer('text/plain', 'text/plain', charset, 'urlencoded', data)
    assert buffer.text() == expected


def test_text_unknown_charset_falls_back_to_utf8(datauri_caplog: pytest.LogCaptureFixture) -> None:
    buffer = DecodedBuffer('text/plain', 'text/plain;charset=x-unknown', 'x-unknown', 'urlencoded', b'abc')
    assert buffer.text() == 'abc'
    assert any(
        record.levelno == logging.WARNING and 'x-unknown' in record.getMessage()
        for record in datauri_caplog.records
    )


def test_to_base64() -> None:
    buffer = DecodedBuffer('text/plain', 'text/plain', '', 'base64', b'Hello, World!')
    assert buffer.to_base64() == 'SGVsbG8sIFdvcmxkIQ=='


def test_text_unknown_charset_replaces_invalid_bytes() -> None:
    buffer = DecodedBuffer('text/plain', 'text/plain;charset=x-unknown', 'x-unknown', 'urlencoded', b'\xf9abc')
    assert buffer.text() == '�abc'


def test_text_explicit_encoding_is_strict() -> None:
    buffer = DecodedBuffer('text/plain', 'text/plain;charset=US-ASCII', 'US-ASCII', 'urlencoded', b'\xff')
    with pytest.raises(UnicodeDecodeError):
        buffer.text('ascii')
