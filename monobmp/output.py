PREVIEW_MAX_WIDTH = 200

WIDE_NOTICE = 'Image is wider than %dpx and is therefore not drawn!' \
              % PREVIEW_MAX_WIDTH

GENERATOR = 'monobmp2array'

declarations = """/* Image data */
unsigned int ImgWidthBytes = %d;
unsigned int ImgWidthPixels = %d;
unsigned int ImgHeightPixels = %d;
unsigned int ImgTotalBytes = %d;

"""

def render_byte(value):
    s = ''
    bit = 128

    while bit:
        # White is drawn
        if value & bit:
            s = s + '*'
        else:
            s = s + ' '
        bit = bit >> 1

    return s

def ascii_art(plane):
    return [''.join(render_byte(v) for v in r) for r in plane.rows]

def preview(header, plane):
    if header.width < PREVIEW_MAX_WIDTH:
        return ascii_art(plane)
    return [WIDE_NOTICE]

def c_row_literal(row):
    return '{' + ','.join('0x%02X' % v for v in row) + '}'

def c_declarations(header):
    return declarations % (header.width_bytes, header.width, header.height,
                           header.plane_size)

def write_array(f, plane, progress=None):
    f.write('const char ImgArray[%d][%d] = {\n'
            % (plane.height, plane.width_bytes))

    for y in range(plane.height):
        f.write(c_row_literal(plane.row(y)))
        if y < plane.height - 1:
            f.write(',')
        f.write('\n')
        if progress:
            progress(y + 1, plane.height)

    f.write('};\n\n')

def write_header_file(f, source, header, plane, progress=None):
    """Write the preview comment, the size constants and the pixel array."""
    f.write('/* Image data for %s %dx%d */\n'
            % (source, header.width, header.height))
    f.write('/* Generated by %s */\n' % GENERATOR)
    f.write('/*\n')
    if header.width >= PREVIEW_MAX_WIDTH:
        # blank line before the notice
        f.write('\n')
    for line in preview(header, plane):
        f.write(line + '\n')
    f.write('*/\n\n')

    f.write(c_declarations(header))
    write_array(f, plane, progress)
