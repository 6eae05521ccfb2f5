#!/usr/bin/env python3
"""
Render split ROM images as a PNG for eyeballing the interleave

Copyright 2026 the romjak authors

Copying and distribution of this file, with or without modification,
are permitted in any medium without royalty provided the copyright
notice and this notice are preserved.  This file is offered as-is,
without any warranty.

Each byte becomes one pixel.  Values $00-$FE form a gray ramp, and
the $FF pad byte is drawn in magenta so that unfilled space stands
out from data.
"""
from PIL import Image
from romstripe import PAD_BYTE

pad_color = b'\xff\x00\xff'
column_gap = 4

def make_palette():
    ramp = b''.join(bytes((i, i, i)) for i in range(256))
    return ramp[:3 * PAD_BYTE] + pad_color + ramp[3 * PAD_BYTE + 3:]

def image_to_pil(data, width=64):
    """Convert one output image to an indexed Pillow image.

The last row is filled out with pad bytes if the image length is not
a multiple of width.
"""
    width = max(1, min(width, len(data)))
    height = -(-len(data) // width)
    data = bytes(data) + bytes([PAD_BYTE]) * (width * height - len(data))
    im = Image.frombytes('P', (width, height), data)
    im.putpalette(make_palette())
    return im

def preview_to_pil(images, width=64):
    """Lay out images indexed [bank][rom] as columns, left to right."""
    columns = [image_to_pil(data, width) for row in images for data in row]
    if not columns:
        raise ValueError("no images to preview")
    total_w = (sum(im.size[0] for im in columns)
               + column_gap * (len(columns) - 1))
    total_h = max(im.size[1] for im in columns)
    out = Image.new('P', (total_w, total_h), 0)
    out.putpalette(make_palette())
    x = 0
    for im in columns:
        out.paste(im, (x, 0))
        x += im.size[0] + column_gap
    return out

def load_images(filenames):
    out = []
    for row in filenames:
        bank = []
        for filename in row:
            with open(filename, 'rb') as infp:
                bank.append(infp.read())
        out.append(bank)
    return out

def save_preview(filenames, outfilename, width=64):
    """Read back written outputs, indexed [bank][rom], and save a PNG."""
    preview_to_pil(load_images(filenames), width).save(outfilename)
