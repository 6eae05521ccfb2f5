#!/usr/bin/env python3
"""
Layout planner for splitting a binary across banked ROMs

Copyright 2026 the romjak authors

Copying and distribution of this file, with or without modification,
are permitted in any medium without royalty provided the copyright
notice and this notice are preserved.  This file is offered as-is,
without any warranty.
"""
from collections import namedtuple

MAX_ROMS = 16
MAX_ROM_WIDTH = 32
MAX_STRIDE = MAX_ROM_WIDTH // 8
MAX_BANKS = 4

RomConfig = namedtuple('RomConfig', [
    'num_roms', 'rom_size', 'rom_width', 'num_banks', 'pad_to_size'
])
RomConfig.__new__.__defaults__ = (None, None, None)

Geometry = namedtuple('Geometry', [
    'num_roms', 'rom_size', 'rom_width', 'num_banks', 'pad_to_size',
    'roms_per_bank', 'bank_size', 'stride', 'total_size', 'repeat_period',
])

class ConfigValidationError(ValueError):
    pass

def _get_or_default(value, defval):
    return defval if value is None else value

def plan(config):
    """Work out the shape of the output images.

config -- a RomConfig; rom_width, num_banks and pad_to_size may be
    None to use 8 bits, 1 bank and the total size respectively

Every check is made here, before anything touches the filesystem.
Return a Geometry or raise ConfigValidationError.
"""
    num_roms, rom_size = config.num_roms, config.rom_size
    if num_roms is None or num_roms < 1:
        raise ConfigValidationError("need at least 1 ROM, not %s"
                                    % (num_roms,))
    if rom_size is None or rom_size < 1:
        raise ConfigValidationError("ROM size must be at least 1 byte, not %s"
                                    % (rom_size,))
    total_size = rom_size * num_roms
    pad_to_size = _get_or_default(config.pad_to_size, total_size)
    num_banks = _get_or_default(config.num_banks, 1)
    rom_width = _get_or_default(config.rom_width, 8)
    if num_banks < 1:
        raise ConfigValidationError("need at least 1 bank, not %d"
                                    % num_banks)
    if rom_width < 8:
        raise ConfigValidationError("ROM width must be at least 8, not %d"
                                    % rom_width)
    if pad_to_size < 1:
        raise ConfigValidationError("pad up to size must be at least 1, not %d"
                                    % pad_to_size)

    if num_banks > MAX_BANKS:
        raise ConfigValidationError("Sorry, too many banks (%d, more than %d)"
                                    % (num_banks, MAX_BANKS))
    if rom_width % 8 != 0:
        raise ConfigValidationError("ROM width needs to be a multiple of 8, not %d"
                                    % rom_width)
    if rom_width > MAX_ROM_WIDTH:
        raise ConfigValidationError("ROM width is too big (%d, more than %d)"
                                    % (rom_width, MAX_ROM_WIDTH))
    if num_roms % num_banks != 0:
        raise ConfigValidationError(
            "number of ROMs must be a multiple of number of banks (%d ROMs, %d banks)"
            % (num_roms, num_banks)
        )
    if num_roms > MAX_ROMS:
        raise ConfigValidationError("Sorry, too many ROMs (%d, more than %d)"
                                    % (num_roms, MAX_ROMS))

    stride = rom_width // 8
    if rom_size % stride != 0:
        raise ConfigValidationError(
            "ROM size %d is not a multiple of the %d-byte ROM width"
            % (rom_size, stride)
        )

    roms_per_bank = num_roms // num_banks
    return Geometry(
        num_roms=num_roms, rom_size=rom_size, rom_width=rom_width,
        num_banks=num_banks, pad_to_size=pad_to_size,
        roms_per_bank=roms_per_bank,
        bank_size=rom_size * roms_per_bank,
        stride=stride,
        total_size=total_size,
        repeat_period=pad_to_size,
    )

def repeat_count(geometry):
    """Count the repeat periods that begin within the whole output.

Only for display; the striping engine rewinds by position, not count.
"""
    return -(-geometry.total_size // geometry.repeat_period)

def bank_range(geometry, bank):
    """Return the first and last absolute address of a bank."""
    start = geometry.bank_size * bank
    return start, start + geometry.bank_size - 1
