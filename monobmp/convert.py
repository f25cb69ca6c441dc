#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import sys
from optparse import OptionParser

from monobmp.bitmap import Bitmap
from monobmp.errors import CannotOpenOutput, ConversionError, \
    MissingArgument, printable
from monobmp.output import preview, write_header_file

def print_header(bitmap):
    h = bitmap.header
    print('Filesize: %d bytes' % h.file_size)
    print('Pixeldata starts at: %d %X' % (h.pixel_offset, h.pixel_offset))
    print('Width: %d' % h.width)
    print('Height: %d' % h.height)
    print('Colorplane: %d' % h.color_planes)
    print('Bits Per Pixel: %d' % h.bits_per_pixel)
    print('Compression: %d' % h.compression)
    print('Pixel size: %d bytes %X' % (h.pixel_data_size, h.pixel_data_size))
    print('DPI horizontal: %u %X' % (h.dpi_horizontal, h.dpi_horizontal))
    print('DPI vertical: %u %X' % (h.dpi_vertical, h.dpi_vertical))
    print('Number of colors: %d' % h.palette_colors)
    print('Important colors: %d' % h.important_colors)
    print('Header Bytes Read: %d' % bitmap.header_bytes)

    if bitmap.skipped:
        print('Seeking %d bytes to pixeldata...' % bitmap.skipped)

    print('Each row has %d bytes of pixeldata' % h.width_bytes)
    print('Each row with padding is %d bytes' % h.padded_row_bytes)

def print_progress(done, total):
    sys.stdout.write('\rProgress: %3d %%' % (done * 100 // total))
    sys.stdout.flush()

def open_output(fname):
    try:
        # the generated file uses DOS line endings
        return open(fname, 'w', encoding='utf-8', errors='surrogateescape',
                    newline='\r\n')
    except OSError as e:
        raise CannotOpenOutput(fname, e.strerror)

def convert(infile, outfile=None):
    print('Starting monochrome bitmap analyzer...')
    print('Opening %s' % printable(infile))

    bitmap = Bitmap(infile)
    print_header(bitmap)

    for w in bitmap.warnings:
        print('WARNING: %s' % w)

    f = None
    if outfile is None:
        print('No output arguments given! will not generate output file')
    else:
        try:
            f = open_output(outfile)
        except CannotOpenOutput as e:
            print('WARNING: %s' % e)

    for line in preview(bitmap.header, bitmap.plane):
        print(line)

    if f is not None:
        with f:
            write_header_file(f, infile, bitmap.header, bitmap.plane,
                              print_progress)
        print()
        print('File written to %s.' % printable(outfile))

    print('All done')
    return bitmap

def main(argv=None):
    parser = OptionParser(usage='usage: %prog <input.bmp> [<output.h>]',
                          description='Convert a monochrome bitmap to a C '
                          'array of rows, top row first.')

    options, args = parser.parse_args(argv)

    if len(args) > 2:
        parser.print_help()
        return 2

    if not args:
        print(MissingArgument())
        parser.print_help()
        return 2

    try:
        convert(*args)
    except ConversionError as e:
        print('ERROR: %s' % e)
        return 1

    return 0

if __name__ == '__main__':
    sys.exit(main())
