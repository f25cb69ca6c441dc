import struct
from collections import namedtuple
from PIL import Image

from monobmp.errors import CannotOpenInput, MissingPixelData, OutOfMemory, \
    TruncatedHeader

# Rows of pixel data in the file are padded to this many bytes
ROW_ALIGNMENT = 4
MAGIC = b'BM'

# Each entry is (attribute, description, format). An integer format is a
# region of that many bytes which is consumed but not interpreted.
# The info header size is skipped: the remaining fields assume the
# standard 40 byte BITMAPINFOHEADER.
HEADER_LAYOUT = [
    ('magic', 'BM magic', 2),
    ('file_size', 'size', '<I'),
    ('reserved', 'app specific bytes', 4),
    ('pixel_offset', 'pixel offset', '<I'),
    ('info_size', 'dib header', 4),
    ('width', 'width', '<i'),
    ('height', 'height', '<i'),
    ('color_planes', 'colorplane', '<h'),
    ('bits_per_pixel', 'bits per pixel', '<H'),
    ('compression', 'compression field', '<I'),
    ('pixel_data_size', 'pixelsize', '<I'),
    ('dpi_horizontal', 'dpi hor', '<I'),
    ('dpi_vertical', 'dpi ver', '<I'),
    ('palette_colors', '# colours in pallete', '<I'),
    ('important_colors', 'important colours', '<I'),
]

HEADER_SIZE = sum(f if isinstance(f, int) else struct.calcsize(f)
                  for n, d, f in HEADER_LAYOUT)

def row_bytes(width):
    """Number of bytes holding one row of a 1 bit image of width pixels."""
    return (max(width, 0) + 7) // 8

def padded_row_bytes(width):
    n = row_bytes(width)
    return n + (-n % ROW_ALIGNMENT)

class BitmapHeader(namedtuple('BitmapHeader',
                              [n for n, d, f in HEADER_LAYOUT
                               if not isinstance(f, int)])):
    __slots__ = ()

    @property
    def width_bytes(self):
        return row_bytes(self.width)

    @property
    def padded_row_bytes(self):
        return padded_row_bytes(self.width)

    @property
    def row_count(self):
        return max(self.height, 0)

    @property
    def plane_size(self):
        return self.width_bytes * self.row_count

class HeaderReader:
    """Read the file and info headers of a monochrome BMP field by field.

    bytes_read counts every byte consumed from the stream, including the
    skip to the pixel data. Warnings about unexpected but tolerated values
    are collected in warnings; structural problems raise.
    """

    def __init__(self, stream):
        self.stream = stream
        self.bytes_read = 0
        self.header_bytes = 0
        self.skipped = 0
        self.warnings = []

    def take(self, count, field):
        data = self.stream.read(count)
        if len(data) != count:
            raise TruncatedHeader(field)
        self.bytes_read += count
        return data

    def read(self):
        values = {}
        for name, description, fmt in HEADER_LAYOUT:
            if isinstance(fmt, int):
                data = self.take(fmt, description)
                if name == 'magic' and data != MAGIC:
                    self.warnings.append('File does not start with BM! '
                                         'Will try to continue...')
            else:
                data = self.take(struct.calcsize(fmt), description)
                values[name] = struct.unpack(fmt, data)[0]

        header = BitmapHeader(**values)
        self.header_bytes = self.bytes_read
        self.check(header)
        self.seek_pixels(header)
        return header

    def check(self, header):
        if header.bits_per_pixel != 1:
            self.warnings.append('Image is not a monochrome image! '
                                 'Will try to continue...')
        if header.compression != 0:
            self.warnings.append('Image has compression! '
                                 'Will try to continue...')
        if header.width <= 0 or header.height <= 0:
            self.warnings.append('Image has no pixels (%dx%d)! '
                                 'Will try to continue...'
                                 % (header.width, header.height))

    def seek_pixels(self, header):
        if self.bytes_read < header.pixel_offset:
            count = header.pixel_offset - self.bytes_read
            data = self.stream.read(count)
            if len(data) != count:
                raise MissingPixelData(count, len(data))
            self.bytes_read += count
            self.skipped = count
        elif self.bytes_read > header.pixel_offset:
            # the pixel data may already have been consumed; not rewound
            self.warnings.append('Image header too small! '
                                 'Will try to continue...')

class PixelPlane:
    """Top-down, unpadded rows of a 1 bit image.

    Bits are MSB first, left to right; a set bit is white.
    """

    def __init__(self, width, height, width_bytes, data, complete=True):
        self.width = width
        self.height = height
        self.width_bytes = width_bytes
        self.data = bytes(data)
        self.complete = complete

    def __len__(self):
        return len(self.data)

    def row(self, y):
        start = y * self.width_bytes
        return self.data[start:start + self.width_bytes]

    @property
    def rows(self):
        return tuple(self.row(y) for y in range(self.height))

    def pixel(self, x, y):
        value = self.data[y * self.width_bytes + x // 8]
        return (value >> (7 - x % 8)) & 1

    def image(self):
        size = (self.width, self.height)
        if not self.data or not self.width:
            return Image.new('1', size, 0)
        # mode '1' raw rows have the same layout as the plane
        return Image.frombytes('1', size, self.data)

    def show(self):
        self.image().show()

def reconstruct_plane(stream, header):
    """Read the pixel data following the header into a PixelPlane.

    Rows are stored bottom-up in the file, so the n-th padded row read
    becomes row height - 1 - n of the plane. Running out of data is not
    an error; the remaining bytes stay zero and complete is False.
    """
    width_bytes = header.width_bytes
    padded = header.padded_row_bytes
    height = header.row_count
    size = width_bytes * height

    try:
        data = bytearray(size)
    except (MemoryError, OverflowError):
        raise OutOfMemory(size)

    complete = True
    if padded:
        for source_row in range(height):
            chunk = stream.read(padded)
            pixels = chunk[:width_bytes]
            start = (height - 1 - source_row) * width_bytes
            data[start:start + len(pixels)] = pixels
            if len(chunk) < padded:
                complete = False
                break

    return PixelPlane(max(header.width, 0), height, width_bytes, data,
                      complete)

class Bitmap:
    def __init__(self, fname, stream=None):
        self.fname = fname
        self.header = None
        self.plane = None
        self.header_bytes = 0
        self.skipped = 0
        self.warnings = []

        if stream is not None:
            self.load(stream)
            return

        try:
            f = open(fname, 'rb')
        except OSError as e:
            raise CannotOpenInput(fname, e.strerror)
        with f:
            self.load(f)

    def load(self, stream):
        reader = HeaderReader(stream)
        self.header = reader.read()
        self.header_bytes = reader.header_bytes
        self.skipped = reader.skipped
        self.warnings = list(reader.warnings)

        self.plane = reconstruct_plane(stream, self.header)
        if not self.plane.complete:
            self.warnings.append('Pixel data ended early! Missing rows '
                                 'are left black')
