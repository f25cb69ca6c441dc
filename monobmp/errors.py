import os

def printable(fname):
    """Path as text any UTF-8 stream accepts; bad bytes become U+FFFD."""
    return os.fsencode(fname).decode('utf-8', 'replace')

class ConversionError(Exception):
    pass

class MissingArgument(ConversionError):
    def __init__(self):
        ConversionError.__init__(self, 'No arguments given! Please provide '
                                 'bmp file name')

class CannotOpenInput(ConversionError):
    def __init__(self, fname, reason=None):
        self.fname = fname
        msg = 'Could not open file %s' % printable(fname)
        if reason:
            msg = '%s: %s' % (msg, reason)
        ConversionError.__init__(self, msg)

class TruncatedHeader(ConversionError):
    def __init__(self, field):
        self.field = field
        ConversionError.__init__(self, 'File does not have %s' % field)

class MissingPixelData(ConversionError):
    def __init__(self, wanted, got):
        self.wanted = wanted
        self.got = got
        ConversionError.__init__(self, 'No pixeldata found (wanted to skip '
                                 '%d bytes, got %d)' % (wanted, got))

class OutOfMemory(ConversionError):
    def __init__(self, size):
        self.size = size
        ConversionError.__init__(self, 'Could not allocate %d bytes for '
                                 'pixel buffer' % size)

class CannotOpenOutput(ConversionError):
    def __init__(self, fname, reason=None):
        self.fname = fname
        msg = 'Could not open output file for writing! (%s' \
            % printable(fname)
        if reason:
            msg = '%s: %s' % (msg, reason)
        ConversionError.__init__(self, msg + ')')
