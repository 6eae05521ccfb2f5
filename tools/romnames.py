#!/usr/bin/env python3
"""
Output file names for split ROM images

Copyright 2026 the romjak authors

Copying and distribution of this file, with or without modification,
are permitted in any medium without royalty provided the copyright
notice and this notice are preserved.  This file is offered as-is,
without any warranty.
"""

def name_for(basename, bank, rom, num_banks):
    """Name one output image.

With a single bank the bank number is left out: "out.0", "out.1".
With more, both appear: "out.0.0", "out.0.1", "out.1.0".
"""
    if num_banks == 1:
        return "%s.%d" % (basename, rom)
    return "%s.%d.%d" % (basename, bank, rom)

def output_names(basename, geometry):
    """Return the names of every output, indexed [bank][rom]."""
    return [
        [name_for(basename, bank, rom, geometry.num_banks)
         for rom in range(geometry.roms_per_bank)]
        for bank in range(geometry.num_banks)
    ]
