from monobmp.bitmap import Bitmap, BitmapHeader, HeaderReader, PixelPlane, \
    reconstruct_plane
from monobmp.errors import ConversionError

__version__ = '1.0.0'
