#!/usr/bin/env python3
"""
Striping engine: interleave one binary across banks of ROMs

Copyright 2026 the romjak authors

Copying and distribution of this file, with or without modification,
are permitted in any medium without royalty provided the copyright
notice and this notice are preserved.  This file is offered as-is,
without any warranty.

Each bank is a run of bank_size bytes of the logical output.  Within
a bank, consecutive stride-sized chunks go to ROM 0, ROM 1, ...,
ROM roms_per_bank - 1, then back to ROM 0.  So with two 8-bit ROMs
in one bank, ROM 0 gets the even bytes and ROM 1 the odd bytes.

The input is repeated every pad_to_size bytes of logical output.
Anything past the end of the input within one repeat is filled with
$FF, the value of erased flash or EPROM.
"""
from io import BytesIO

PAD_BYTE = 0xFF

class RepeatingSource(object):
    """Sequential reader that replays a file every `period` bytes.

infp -- a readable binary file object
period -- length in bytes of one repeat of the input
size -- length of the input, or None to find it by seeking

.pos is the absolute output position of the next chunk.  Chunks are
handed out back to back, so the file cursor always sits at
pos % period when a chunk starts.  The file is never seeked except
to rewind it.
"""

    def __init__(self, infp, period, size=None):
        if size is None:
            infp.seek(0, 2)
            size = infp.tell()
            infp.seek(0)
        self.infp = infp
        self.period = period
        self.size = size
        self.pos = 0

    def read_or_pad(self, stride):
        """Return the next stride bytes of output.

The test against the period is made once, at the chunk's first byte.
A chunk is never split across a repeat boundary.
"""
        repeat_pos = self.pos % self.period
        if repeat_pos == 0:
            self.infp.seek(0)
        data = bytearray([PAD_BYTE]) * stride
        if repeat_pos < self.size:
            got = self.infp.read(stride)
            data[:len(got)] = got
        self.pos += stride
        return bytes(data)

def chunk_positions(geometry):
    """Generate (bank, rom, abs_pos) for every chunk in write order."""
    row_size = geometry.roms_per_bank * geometry.stride
    for bank in range(geometry.num_banks):
        bank_base = bank * geometry.bank_size
        for bank_offset in range(0, geometry.bank_size, row_size):
            for rom in range(geometry.roms_per_bank):
                yield bank, rom, bank_base + bank_offset + rom * geometry.stride

def stripe(geometry, infp, outfps, size=None):
    """Write every output image.

geometry -- a Geometry from romplan.plan()
infp -- the input, a readable binary file object
outfps -- writable binary file objects indexed [bank][rom]
size -- input length, or None to measure infp

Read and write errors propagate; whatever was already written stays.
"""
    if len(outfps) != geometry.num_banks:
        raise ValueError("expected %d banks of outputs, not %d"
                         % (geometry.num_banks, len(outfps)))
    for bank, row in enumerate(outfps):
        if len(row) != geometry.roms_per_bank:
            raise ValueError("bank %d: expected %d outputs, not %d"
                             % (bank, geometry.roms_per_bank, len(row)))

    src = RepeatingSource(infp, geometry.repeat_period, size)
    # chunk_positions visits every position once, in increasing order
    for bank, rom, _ in chunk_positions(geometry):
        outfps[bank][rom].write(src.read_or_pad(geometry.stride))

def stripe_bytes(geometry, data):
    """Stripe a byte string in memory.

Return the contents of each output image, indexed [bank][rom].
"""
    outfps = [[BytesIO() for rom in range(geometry.roms_per_bank)]
              for bank in range(geometry.num_banks)]
    stripe(geometry, BytesIO(data), outfps)
    return [[outfp.getvalue() for outfp in row] for row in outfps]
