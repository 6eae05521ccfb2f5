import pytest
from romplan import (RomConfig, Geometry, ConfigValidationError, plan,
                     repeat_count, bank_range)

def test_defaults():
    g = plan(RomConfig(num_roms=2, rom_size=4))
    assert g.rom_width == 8
    assert g.num_banks == 1
    assert g.pad_to_size == 8
    assert g.stride == 1
    assert g.roms_per_bank == 2
    assert g.bank_size == 8
    assert g.total_size == 8

def test_wide_banked():
    g = plan(RomConfig(num_roms=8, rom_size=0x8000, rom_width=16,
                       num_banks=2, pad_to_size=0x4000))
    assert g.stride == 2
    assert g.roms_per_bank == 4
    assert g.bank_size == 0x20000
    assert g.total_size == 0x40000
    assert g.pad_to_size == 0x4000
    assert g.repeat_period == 0x4000

@pytest.mark.parametrize("num_roms, num_banks, rom_width", [
    (1, 1, 8), (2, 1, 16), (4, 2, 32), (16, 4, 8), (12, 3, 24), (16, 1, 32),
])
def test_geometry_adds_up(num_roms, num_banks, rom_width):
    # rom_size 48 divides evenly into 1, 2, 3 and 4 byte chunks; the
    # 24-bit case needs a rom_size divisible by 3
    g = plan(RomConfig(num_roms=num_roms, rom_size=48, rom_width=rom_width,
                       num_banks=num_banks))
    assert g.roms_per_bank * g.num_banks == g.num_roms
    assert g.bank_size * g.num_banks == g.total_size

@pytest.mark.parametrize("config, message", [
    (RomConfig(num_roms=3, rom_size=4, num_banks=2), "multiple of number of banks"),
    (RomConfig(num_roms=2, rom_size=4, rom_width=12), "multiple of 8"),
    (RomConfig(num_roms=5, rom_size=4, num_banks=5), "too many banks"),
    (RomConfig(num_roms=2, rom_size=8, rom_width=40), "too big"),
    (RomConfig(num_roms=17, rom_size=4), "too many ROMs"),
    (RomConfig(num_roms=0, rom_size=4), "at least 1 ROM"),
    (RomConfig(num_roms=2, rom_size=0), "at least 1 byte"),
    (RomConfig(num_roms=2, rom_size=4, num_banks=0), "at least 1 bank"),
    (RomConfig(num_roms=2, rom_size=4, rom_width=0), "at least 8"),
    (RomConfig(num_roms=2, rom_size=4, pad_to_size=0), "at least 1"),
    (RomConfig(num_roms=2, rom_size=6, rom_width=32), "not a multiple"),
])
def test_rejected(config, message):
    with pytest.raises(ConfigValidationError, match=message):
        plan(config)

def test_validation_error_is_value_error():
    with pytest.raises(ValueError):
        plan(RomConfig(num_roms=3, rom_size=4, num_banks=2))

def test_bank_limit_checked_before_divisibility():
    # 6 ROMs in 5 banks breaks both rules; the bank limit is reported
    with pytest.raises(ConfigValidationError, match="too many banks"):
        plan(RomConfig(num_roms=6, rom_size=4, num_banks=5))

def test_repeat_count():
    g = plan(RomConfig(num_roms=2, rom_size=0x8000, pad_to_size=0x8000))
    assert repeat_count(g) == 2
    g = plan(RomConfig(num_roms=2, rom_size=4, pad_to_size=3))
    assert repeat_count(g) == 3
    g = plan(RomConfig(num_roms=2, rom_size=4))
    assert repeat_count(g) == 1

def test_bank_range():
    g = plan(RomConfig(num_roms=4, rom_size=0x100, num_banks=2))
    assert bank_range(g, 0) == (0, 0x1FF)
    assert bank_range(g, 1) == (0x200, 0x3FF)
