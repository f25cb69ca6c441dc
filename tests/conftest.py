import struct
import pytest

def build_bmp(width, height, rows, offset=62, bpp=1, compression=0,
              magic=b'BM', pad=b'\xaa'):
    """Assemble a BMP file from rows given bottom-up (file order).

    Each row holds the unpadded pixel bytes; padding to 4 bytes is added
    here. Bytes between the 54 byte header and offset are filled with
    zeros, like the two palette entries of a real monochrome bitmap.
    """
    width_bytes = (width + 7) // 8
    padded = width_bytes + (-width_bytes % 4)
    pixels = b''.join(bytes(r) + pad * (padded - len(r)) for r in rows)
    gap = b'\x00' * max(offset - 54, 0)
    size = 54 + len(gap) + len(pixels)

    header = magic
    header += struct.pack('<I', size)
    header += b'\x00' * 4
    header += struct.pack('<I', offset)
    header += struct.pack('<I', 40)
    header += struct.pack('<iihHIIIIII', width, height, 1, bpp, compression,
                          len(pixels), 2835, 2835, 2, 2)
    return header + gap + pixels

@pytest.fixture
def bmp():
    return build_bmp
