# pnmrgba.py

# Copyright (c) 2023-2026, Christoph Gohlke
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# 1. Redistributions of source code must retain the above copyright notice,
#    this list of conditions and the following disclaimer.
#
# 2. Redistributions in binary form must reproduce the above copyright notice,
#    this list of conditions and the following disclaimer in the documentation
#    and/or other materials provided with the distribution.
#
# 3. Neither the name of the copyright holder nor the names of its
#    contributors may be used to endorse or promote products derived from
#    this software without specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.

"""Decode Netpbm files to RGBA pixels.

Pnmrgba is a Python library to decode image files in the Netpbm formats
into a buffer of 32-bit RGBA values:

- PBM (Portable Bit Map): P1 (text) and P4 (binary)
- PGM (Portable Gray Map): P2 (text) and P5 (binary)
- PPM (Portable Pixel Map): P3 (text) and P6 (binary)
- PAM (Portable Arbitrary Map): P7, depth 1 to 4 (gray, gray-alpha, rgb,
  and rgb-alpha)

Each pixel is packed into one unsigned 32-bit integer as
``(red << 24) | (green << 16) | (blue << 8) | alpha``.
Samples are scaled from the range 0 to maxval of the file to 0 to 255.
Images without alpha channel are opaque. In bilevel images, 1 is black.

The Netpbm formats are specified at http://netpbm.sourceforge.net/doc/.

No gamma correction is performed. Writing files is not supported.

:Author: `Christoph Gohlke <https://www.cgohlke.com>`_
:License: BSD 3-Clause
:Version: 2026.10.16

Quickstart
----------

Install the pnmrgba package and all dependencies from the
`Python Package Index <https://pypi.org/project/pnmrgba/>`_::

    python -m pip install -U pnmrgba[all]

See `Examples`_ for using the programming interface.

Requirements
------------

This release has been tested with the following requirements and dependencies
(other versions may work):

- `CPython 3.9, 3.10, 3.11, 3.12 <https://www.python.org>`_
- `NumPy 1.26 <https://pypi.org/project/numpy/>`_
- `Matplotlib 3.8 <https://pypi.org/project/matplotlib/>`_
  (optional for displaying images from the command line)

Notes
-----

Binary PBM (P4) data is read as one continuous bit stream, most significant
bit first. Rows are not padded to byte boundaries. Files written by the
Netpbm tools pad rows, which results in skewed images when the width is not
a multiple of 8. A warning is logged when such a file has unread trailing
data.

Unknown PAM header fields, for example TUPLTYPE, are ignored.

Text PBM (P1) data may only contain the digits 0 and 1, whitespace, and
comments. Other characters raise MalformedIntegerError, while the Netpbm
tools skip them.

Open binary streams are read from their current position. After decoding,
seekable streams are positioned after the image data, so concatenated
images can be decoded one after another. Streams that cannot seek are read
to the end.

Revisions
---------

2026.10.16

- Initial release.

Examples
--------

Decode a PGM image from an open binary stream:

>>> image = decode(io.BytesIO(b'P2 2 1 255 0 255'))
>>> image.width, image.height
(2, 1)
>>> [hex(pixel) for pixel in image.pixels]
['0xff', '0xffffffff']

Access header and image data in a PAM file:

>>> with open('_tmp.pam', 'wb') as fh:
...     _ = fh.write(b'P7\\nWIDTH 2\\nHEIGHT 1\\nDEPTH 2\\nMAXVAL 255\\n')
...     _ = fh.write(b'TUPLTYPE GRAYSCALE_ALPHA\\nENDHDR\\n\\x80\\x00\\xff\\xff')
>>> with PnmFile('_tmp.pam') as pam:
...     pam.magicnumber
...     pam.shape
...     pam.depth
...     pam.maxval
...     [hex(pixel) for pixel in pam.asarray()]
'P7'
(1, 2)
2
255
['0x80808000', '0xffffffff']

Read the image as an array of 8-bit RGBA samples:

>>> imread('_tmp.pam').tolist()
[[[128, 128, 128, 0], [255, 255, 255, 255]]]

View the image and metadata in the Netpbm file from the command line::

    $ python -m pnmrgba _tmp.pam

"""

from __future__ import annotations

__version__ = '2026.10.16'

__all__ = [
    'decode',
    'imread',
    'unpack_rgba',
    'PnmFile',
    'PnmImage',
    'ImageHeader',
    'PnmFormat',
    'PnmTokenizer',
    'PnmError',
    'PnmOpenError',
    'InvalidMagicError',
    'UnexpectedEofError',
    'MalformedIntegerError',
    'InvalidDimensionError',
    'InvalidRangeError',
    'RangeExceededError',
]

import enum
import io
import os
import sys
import warnings

import numpy

from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from typing import BinaryIO, Callable, Union

    PathLike = Union[str, os.PathLike]

MAXVAL_MAX = 65535
"""Largest maxval allowed in Netpbm headers."""

WHITESPACE = b' \t\n\v\f\r'

BLACK = 0x000000FF
WHITE = 0xFFFFFFFF


class PnmError(ValueError):
    """Base class for errors decoding Netpbm files."""


class PnmOpenError(OSError, PnmError):
    """File could not be opened."""


class InvalidMagicError(PnmError):
    """File does not start with a supported magic number."""


class UnexpectedEofError(PnmError):
    """Data ended within a header token or the image data."""


class MalformedIntegerError(PnmError):
    """Invalid character in decimal integer or bitmap data."""


class InvalidDimensionError(PnmError):
    """Image width or height is less than 1."""


class InvalidRangeError(PnmError):
    """Maxval or depth out of range."""


class RangeExceededError(PnmError):
    """Sample value greater than maxval."""


class PnmFormat(enum.IntEnum):
    """Netpbm formats, numbered by the digit of their magic number."""

    PBM_ASCII = 1
    PGM_ASCII = 2
    PPM_ASCII = 3
    PBM_RAW = 4
    PGM_RAW = 5
    PPM_RAW = 6
    PAM = 7

    @property
    def magicnumber(self) -> str:
        """Magic number identifying format in file."""
        return f'P{self.value}'

    @property
    def isbilevel(self) -> bool:
        """Format stores one bit per pixel and has no maxval field."""
        return self in (PnmFormat.PBM_ASCII, PnmFormat.PBM_RAW)


class ImageHeader(NamedTuple):
    """Validated Netpbm header."""

    width: int
    """Number of columns in image."""

    height: int
    """Number of rows in image."""

    maxval: int
    """Maximum value of image samples. 1 for PBM."""

    depth: int | None = None
    """Number of samples per pixel. Only set for PAM."""

    @property
    def size(self) -> int:
        """Number of pixels in image."""
        return self.width * self.height


class PnmImage(NamedTuple):
    """Decoded image."""

    pixels: numpy.ndarray
    """Packed RGBA values of type uint32, one per pixel, in row order."""

    width: int
    """Number of columns in image."""

    height: int
    """Number of rows in image."""


def decode(file: PathLike | BinaryIO, /) -> PnmImage:
    """Return RGBA pixels, width, and height of image in Netpbm file.

    Parameters:
        file:
            Name of file or open binary file to read.
            Open files are not closed and, if seekable, are positioned
            after the image data.

    Raises:
        PnmError: File cannot be opened or decoded.

    """
    with PnmFile(file) as pnm:
        return PnmImage(pnm.asarray(), pnm.width, pnm.height)


def imread(file: PathLike | BinaryIO, /) -> numpy.ndarray:
    """Return image in Netpbm file as array of 8-bit RGBA samples.

    Parameters:
        file:
            Name of file or open binary file to read.

    Returns:
        Array of type uint8 and shape (height, width, 4).

    """
    with PnmFile(file) as pnm:
        return unpack_rgba(pnm.asarray(), pnm.shape)


def unpack_rgba(
    pixels: numpy.ndarray, shape: tuple[int, int], /
) -> numpy.ndarray:
    """Return packed RGBA values as array of 8-bit samples.

    Parameters:
        pixels:
            Packed RGBA values of type uint32.
        shape:
            Height and width of image.

    """
    data = numpy.asarray(pixels, dtype=numpy.uint32).astype('>u4')
    return data.view(numpy.uint8).reshape(*shape, 4)


class PnmFile:
    """Decode Netpbm file.

    The magic number and header are read when the instance is created.
    Pixel data is decoded by :py:meth:`PnmFile.asarray`.

    Parameters:
        file:
            Name of file or open binary file to read.
            Open files are read from their current position and are not
            closed. After decoding, seekable files are positioned at the
            end of the image data. Other files are read to the end.

    Raises:
        PnmOpenError: File cannot be opened.
        PnmError: File is not a valid Netpbm file.

    """

    format: PnmFormat
    """Netpbm format."""

    header: ImageHeader
    """Image header."""

    filename: str
    """File name."""

    dataoffset: int
    """Position of image data in file."""

    dataend: int | None
    """Position after image data in file. Set by :py:meth:`asarray`."""

    _data: bytes
    _fh: BinaryIO | None
    _start: int
    _seekable: bool

    def __init__(self, file: PathLike | BinaryIO, /) -> None:
        self.filename = ''
        self.dataend = None
        self._fh = None

        if isinstance(file, (str, os.PathLike)):
            try:
                self._fh = open(file, 'rb')
            except OSError as exc:
                raise PnmOpenError(f'cannot open {file!r}: {exc}') from exc
            self.filename = os.fspath(file)
        else:
            self._fh = file

        try:
            seekable = getattr(self._fh, 'seekable', None)
            self._seekable = seekable is not None and seekable()
            self._start = self._fh.tell() if self._seekable else 0
            # validate magic number before reading rest of file
            magic = self._fh.read(2)
            self.format = PnmTokenizer(magic).read_magicnumber()
            self._data = magic + self._fh.read()
            tokenizer = PnmTokenizer(self._data, 2)
            if self.format == PnmFormat.PAM:
                self.header = tokenizer.read_pam_header()
            else:
                self.header = tokenizer.read_pnm_header(
                    maxval=not self.format.isbilevel
                )
            self.dataoffset = self._start + tokenizer.pos
        except Exception:
            self.close()
            raise

    def asarray(self) -> numpy.ndarray:
        """Return packed RGBA values of image.

        Seekable files are positioned at the end of the image data.

        Returns:
            New array of type uint32 and shape (width * height,).

        Raises:
            PnmError: Image data is truncated or invalid.

        """
        tokenizer = PnmTokenizer(self._data, self.dataoffset - self._start)
        pixels = DECODERS[self.format](tokenizer, self.header)
        self.dataend = self._start + tokenizer.pos
        if self._seekable and self._fh is not None:
            self._fh.seek(self.dataend)
        return pixels

    def close(self) -> None:
        """Close file if it was opened by instance."""
        if self.filename and self._fh is not None:
            self._fh.close()
            self._fh = None

    @property
    def magicnumber(self) -> str:
        """ID determining Netpbm type."""
        return self.format.magicnumber

    @property
    def width(self) -> int:
        """Number of columns in image."""
        return self.header.width

    @property
    def height(self) -> int:
        """Number of rows in image."""
        return self.header.height

    @property
    def maxval(self) -> int:
        """Maximum value of image samples."""
        return self.header.maxval

    @property
    def depth(self) -> int:
        """Number of samples per pixel in file."""
        if self.header.depth is not None:
            return self.header.depth
        if self.format in (PnmFormat.PPM_ASCII, PnmFormat.PPM_RAW):
            return 3
        return 1

    @property
    def shape(self) -> tuple[int, int]:
        """Height and width of image."""
        return self.header.height, self.header.width

    @property
    def size(self) -> int:
        """Number of pixels in image."""
        return self.header.size

    def __enter__(self) -> PnmFile:
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def __repr__(self) -> str:
        if self.filename:
            arg = f'{os.path.split(os.path.normcase(self.filename))[-1]!r}'
        elif self._fh is not None:
            arg = str(type(self._fh).__name__)
        else:
            arg = ''
        return f'<{self.__class__.__name__}({arg})>'

    def __str__(self) -> str:
        return indent(
            repr(self),
            f'magicnumber: {self.magicnumber}',
            f'format: {self.format.name}',
            f'shape: {self.shape}',
            f'depth: {self.depth}',
            f'maxval: {self.maxval}',
        )


class PnmTokenizer:
    """Read tokens and raw data from Netpbm file content.

    Tokens are separated by whitespace or comments. Comments start with
    '#' and extend to the end of the line.

    Parameters:
        data:
            Content of Netpbm file.
        pos:
            Position of cursor in data.

    """

    __slots__ = ('data', 'pos')

    data: bytes
    """Content of Netpbm file."""

    pos: int
    """Position of next byte to read."""

    def __init__(self, data: bytes, /, pos: int = 0) -> None:
        self.data = data
        self.pos = pos

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return max(0, len(self.data) - self.pos)

    @property
    def eof(self) -> bool:
        """All data has been read."""
        return self.pos >= len(self.data)

    def read(self, size: int, /) -> bytes:
        """Return next size bytes.

        Raises:
            UnexpectedEofError: Fewer than size bytes remain.

        """
        if size > self.remaining:
            raise UnexpectedEofError(
                'unexpected end of file reading image data: '
                f'{self.remaining} of {size} bytes available'
            )
        data = self.data[self.pos : self.pos + size]
        self.pos += size
        return data

    def skip_comment(self) -> None:
        """Advance cursor past next newline or to end of data."""
        end = self.data.find(b'\n', self.pos)
        self.pos = len(self.data) if end < 0 else end + 1

    def skip_to_token(self) -> None:
        """Advance cursor past whitespace and comments."""
        data = self.data
        while self.pos < len(data):
            c = data[self.pos : self.pos + 1]
            if c == b'#':
                self.skip_comment()
            elif c in WHITESPACE:
                self.pos += 1
            else:
                return

    def is_token_terminator(self) -> bool:
        """Consume one byte and return whether it terminates a token.

        A comment terminates a token and is consumed completely.

        """
        if self.eof:
            return True
        c = self.data[self.pos : self.pos + 1]
        self.pos += 1
        if c == b'#':
            self.skip_comment()
            return True
        return c in WHITESPACE

    def skip_token(self) -> None:
        """Consume bytes up to and including next token terminator."""
        while not self.is_token_terminator():
            pass

    def match_literal(self, word: bytes, /) -> bool:
        """Return whether next token equals word and consume it if so.

        The cursor is not moved if the token does not match.

        """
        pos = self.pos
        if self.data.startswith(word, pos):
            self.pos += len(word)
            if self.is_token_terminator():
                return True
        self.pos = pos
        return False

    def read_uint(self) -> int:
        """Return next token as unsigned decimal integer.

        Raises:
            UnexpectedEofError: Data ends before token.
            MalformedIntegerError: Token contains non-digit character.

        """
        self.skip_to_token()
        if self.eof:
            raise UnexpectedEofError(
                'unexpected end of file while reading integer'
            )
        data = self.data
        start = self.pos
        while self.pos < len(data):
            c = data[self.pos : self.pos + 1]
            if c.isdigit():
                self.pos += 1
            elif c in WHITESPACE or c == b'#':
                break
            else:
                raise MalformedIntegerError(
                    f'invalid character {c!r} in integer at position '
                    f'{self.pos}'
                )
        value = int(data[start : self.pos])
        self.is_token_terminator()
        return value

    def read_magicnumber(self) -> PnmFormat:
        """Return Netpbm format from two-byte magic number.

        Raises:
            InvalidMagicError: Data does not start with P1 to P7.

        """
        magic = self.data[self.pos : self.pos + 2]
        if len(magic) != 2 or magic[:1] != b'P' or magic[1:] not in b'1234567':
            raise InvalidMagicError(
                f'not a Netpbm file: invalid magic number {magic!r}'
            )
        self.pos += 2
        return PnmFormat(int(magic[1:]))

    def read_pnm_header(self, *, maxval: bool = True) -> ImageHeader:
        """Return header of PBM, PGM, or PPM file.

        Parameters:
            maxval:
                Header contains maxval field. False for PBM.

        Raises:
            InvalidDimensionError: Width or height is less than 1.
            InvalidRangeError: Maxval out of range.

        """
        width = self.read_uint()
        if width < 1:
            raise InvalidDimensionError(f'width {width} must be at least 1')
        height = self.read_uint()
        if height < 1:
            raise InvalidDimensionError(f'height {height} must be at least 1')
        if not maxval:
            return ImageHeader(width, height, 1)
        value = self.read_uint()
        if not 1 <= value <= MAXVAL_MAX:
            raise InvalidRangeError(
                f'maxval {value} must be between 1-{MAXVAL_MAX}'
            )
        return ImageHeader(width, height, value)

    def read_pam_header(self) -> ImageHeader:
        """Return header of PAM file.

        Fields may appear in any order. Unknown fields are skipped with
        their value.

        Raises:
            UnexpectedEofError: Data ends before ENDHDR.
            InvalidRangeError: Depth or maxval out of range.
            InvalidDimensionError: Width or height is less than 1.

        """
        width = height = depth = maxval = 0
        while True:
            self.skip_to_token()
            if self.eof:
                raise UnexpectedEofError(
                    'unexpected end of file in PAM header before ENDHDR'
                )
            if self.match_literal(b'DEPTH'):
                depth = self.read_uint()
            elif self.match_literal(b'MAXVAL'):
                maxval = self.read_uint()
            elif self.match_literal(b'HEIGHT'):
                height = self.read_uint()
            elif self.match_literal(b'WIDTH'):
                width = self.read_uint()
            elif self.match_literal(b'ENDHDR'):
                break
            else:
                # e.g. TUPLTYPE
                self.skip_token()
                self.skip_to_token()
                self.skip_token()

        if not 1 <= depth <= 4:
            raise InvalidRangeError(f'depth {depth} must be between 1-4')
        if not 1 <= maxval <= MAXVAL_MAX:
            raise InvalidRangeError(
                f'maxval {maxval} must be between 1-{MAXVAL_MAX}'
            )
        if width < 1:
            raise InvalidDimensionError(f'width {width} must be at least 1')
        if height < 1:
            raise InvalidDimensionError(f'height {height} must be at least 1')
        return ImageHeader(width, height, maxval, depth)


def decode_pbm_ascii(
    tokenizer: PnmTokenizer, header: ImageHeader, /
) -> numpy.ndarray:
    """Return pixels of P1 image."""
    size = header.size
    if tokenizer.remaining < size:
        raise UnexpectedEofError(
            'unexpected end of file reading image data: '
            f'{tokenizer.remaining} bytes for {size} pixels'
        )
    pixels = numpy.empty(size, dtype=numpy.uint32)
    data = tokenizer.data
    i = 0
    while i < size:
        if tokenizer.eof:
            raise UnexpectedEofError(
                f'unexpected end of file after {i} of {size} pixels'
            )
        c = data[tokenizer.pos : tokenizer.pos + 1]
        tokenizer.pos += 1
        if c == b'1':
            pixels[i] = BLACK
            i += 1
        elif c == b'0':
            pixels[i] = WHITE
            i += 1
        elif c == b'#':
            tokenizer.skip_comment()
        elif c not in WHITESPACE:
            raise MalformedIntegerError(
                f'invalid character {c!r} in bitmap data at position '
                f'{tokenizer.pos - 1}'
            )
    return pixels


def decode_pgm_ascii(
    tokenizer: PnmTokenizer, header: ImageHeader, /
) -> numpy.ndarray:
    """Return pixels of P2 image."""
    samples = read_ascii_samples(tokenizer, header.size, header.maxval)
    return pack_rgba(samples, 1)


def decode_ppm_ascii(
    tokenizer: PnmTokenizer, header: ImageHeader, /
) -> numpy.ndarray:
    """Return pixels of P3 image."""
    samples = read_ascii_samples(tokenizer, header.size * 3, header.maxval)
    return pack_rgba(samples, 3)


def decode_pbm_raw(
    tokenizer: PnmTokenizer, header: ImageHeader, /
) -> numpy.ndarray:
    """Return pixels of P4 image.

    Bits are packed continuously, not row by row.

    """
    size = header.size
    data = tokenizer.read((size + 7) // 8)
    bits = numpy.unpackbits(numpy.frombuffer(data, dtype=numpy.uint8))
    pixels = numpy.where(
        bits[:size].astype(bool), numpy.uint32(BLACK), numpy.uint32(WHITE)
    ).astype(numpy.uint32)
    if header.width % 8 and header.height > 1 and tokenizer.remaining:
        log_warning(
            'PBM data followed by %i unread bytes. '
            'The file may use row-aligned packing',
            tokenizer.remaining,
        )
    return pixels


def decode_pgm_raw(
    tokenizer: PnmTokenizer, header: ImageHeader, /
) -> numpy.ndarray:
    """Return pixels of P5 image."""
    samples = read_raw_samples(tokenizer, header.size, header.maxval)
    return pack_rgba(samples, 1)


def decode_ppm_raw(
    tokenizer: PnmTokenizer, header: ImageHeader, /
) -> numpy.ndarray:
    """Return pixels of P6 image."""
    samples = read_raw_samples(tokenizer, header.size * 3, header.maxval)
    return pack_rgba(samples, 3)


def decode_pam(
    tokenizer: PnmTokenizer, header: ImageHeader, /
) -> numpy.ndarray:
    """Return pixels of P7 image."""
    assert header.depth is not None
    samples = read_raw_samples(
        tokenizer, header.size * header.depth, header.maxval
    )
    return pack_rgba(samples, header.depth)


DECODERS: dict[
    PnmFormat, Callable[[PnmTokenizer, ImageHeader], numpy.ndarray]
] = {
    PnmFormat.PBM_ASCII: decode_pbm_ascii,
    PnmFormat.PGM_ASCII: decode_pgm_ascii,
    PnmFormat.PPM_ASCII: decode_ppm_ascii,
    PnmFormat.PBM_RAW: decode_pbm_raw,
    PnmFormat.PGM_RAW: decode_pgm_raw,
    PnmFormat.PPM_RAW: decode_ppm_raw,
    PnmFormat.PAM: decode_pam,
}
"""Map Netpbm format to function decoding its pixel data."""


def read_ascii_samples(
    tokenizer: PnmTokenizer, count: int, maxval: int, /
) -> numpy.ndarray:
    """Return count decimal samples scaled to 0-255.

    Raises:
        RangeExceededError: Sample is greater than maxval.

    """
    # each sample needs at least one digit
    if tokenizer.remaining < count:
        raise UnexpectedEofError(
            'unexpected end of file reading image data: '
            f'{tokenizer.remaining} bytes for {count} samples'
        )
    samples = numpy.empty(count, dtype=numpy.uint32)
    for i in range(count):
        value = tokenizer.read_uint()
        if value > maxval:
            raise RangeExceededError(
                f'sample value {value} greater than maxval {maxval}'
            )
        samples[i] = value
    return scale(samples, maxval)


def read_raw_samples(
    tokenizer: PnmTokenizer, count: int, maxval: int, /
) -> numpy.ndarray:
    """Return count big-endian binary samples scaled to 0-255.

    Samples are 1 byte if maxval is less than 256, else 2 bytes.

    Raises:
        UnexpectedEofError: Data ends before last sample.
        RangeExceededError: Sample is greater than maxval.

    """
    dtype = numpy.dtype('u1' if maxval < 256 else '>u2')
    data = tokenizer.read(count * dtype.itemsize)
    samples = numpy.frombuffer(data, dtype=dtype).astype(numpy.uint32)
    if maxval < 255 or maxval > 255 and maxval < MAXVAL_MAX:
        invalid = numpy.flatnonzero(samples > maxval)
        if invalid.size > 0:
            raise RangeExceededError(
                f'sample value {samples[invalid[0]]} greater than '
                f'maxval {maxval}'
            )
    return scale(samples, maxval)


def scale(samples: numpy.ndarray, maxval: int, /) -> numpy.ndarray:
    """Return uint32 samples scaled from 0-maxval to 0-255."""
    if maxval == 255:
        return samples
    samples = samples * numpy.uint32(255)
    samples //= numpy.uint32(maxval)
    return samples


def pack_rgba(samples: numpy.ndarray, depth: int, /) -> numpy.ndarray:
    """Return samples of depth 1 to 4 packed as RGBA uint32 values.

    Depth 1 is gray, 2 is gray and alpha, 3 is RGB, and 4 is RGB and alpha.
    Missing alpha is opaque.

    """
    samples = samples.reshape(-1, depth)
    if depth < 3:
        red = green = blue = samples[:, 0]
    else:
        red, green, blue = samples[:, 0], samples[:, 1], samples[:, 2]
    pixels = red << numpy.uint32(24)
    pixels |= green << numpy.uint32(16)
    pixels |= blue << numpy.uint32(8)
    if depth % 2 == 0:
        pixels |= samples[:, -1]
    else:
        pixels |= numpy.uint32(0xFF)
    return pixels


def indent(*args) -> str:
    """Return joined string representations of objects with indented lines."""
    text = '\n'.join(str(arg) for arg in args)
    return '\n'.join(
        ('  ' + line if line else line) for line in text.splitlines() if line
    )[2:]


def log_warning(msg, *args, **kwargs):
    """Log message with level WARNING."""
    import logging

    logging.getLogger('pnmrgba').warning(msg, *args, **kwargs)


def main(argv: list[str] | None = None) -> int:
    """Command line usage main function.

    Show images specified on command line or all images in directory.

    """
    from glob import glob

    if argv is None:
        argv = sys.argv

    if len(argv) > 1 and '--doctest' in argv:
        import doctest

        doctest.testmod()
        return 0

    if len(argv) == 1:
        files = glob('*.p*')
    elif '*' in argv[1]:
        files = glob(argv[1])
    elif os.path.isdir(argv[1]):
        files = glob(f'{argv[1]}/*.p*')
    else:
        files = argv[1:]

    try:
        from matplotlib import pyplot
    except ImportError:
        pyplot = None
        warnings.warn('matplotlib not installed, not displaying images')

    for fname in files:
        try:
            with PnmFile(fname) as pnm:
                print(pnm)
                img = unpack_rgba(pnm.asarray(), pnm.shape)
                print()
        except PnmError as exc:
            # raise  # enable for debugging
            print(fname, exc)
            continue

        if pyplot is None:
            continue
        title = f'{os.path.split(fname)[-1]} {pnm.magicnumber} {pnm.shape}'
        pyplot.imshow(img, interpolation='nearest')
        pyplot.title(title)
        pyplot.show()
    return 0


if __name__ == '__main__':
    sys.exit(main())
