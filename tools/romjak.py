#!/usr/bin/env python3
"""
Split a binary into images for several ROMs on a wider or banked bus

Copyright 2026 the romjak authors

Copying and distribution of this file, with or without modification,
are permitted in any medium without royalty provided the copyright
notice and this notice are preserved.  This file is offered as-is,
without any warranty.

Example: a 68000 board with two 8-bit EPROMs forming a 16-bit bus,
where the program is 24 KiB and the chips are 32 KiB each:

    romjak.py --numroms 2 --romsize 0x8000 --paduptosize 0x8000 \\
        prog.bin prog

This writes prog.0 (even bytes) and prog.1 (odd bytes).  The 24 KiB
program is padded with $FF to 32 KiB of address space, and that
32 KiB repeats to fill the 64 KiB the two chips decode.
"""
import sys
import argparse
from contextlib import ExitStack
from romplan import RomConfig, plan, repeat_count, bank_range
from romnames import output_names
from romstripe import stripe

versionText = "%(prog)s 1.0"

paduptosize_help = """How much to pad the input data up to.  For example if
you have a 4 KiB input, pad up to 32 KiB and the bank is 64 KiB, you'll get
two copies of the input padded up to 32 KiB with $FF.  If the input is
bigger than this value it will be truncated.  If this value is missing,
padding will be added to fill up the total size."""

class InputOpenError(OSError):
    def __str__(self):
        return "couldn't open the input file: " + OSError.__str__(self)

class OutputOpenError(OSError):
    def __str__(self):
        return ("couldn't open one of the outputs for writing: "
                + OSError.__str__(self))

# Reporting #########################################################

def describe_plan(geometry):
    return [
        "Going to create outputs for %d ROMs:" % geometry.num_roms,
        " - Total data to generate %d bytes, %d bytes per bank"
        % (geometry.total_size, geometry.bank_size),
        " - Each image will be %d bytes long" % geometry.rom_size,
        " - Input data stride (how many bytes put into an output at a time) is %d bytes"
        % geometry.stride,
        " - Input data will be repeated %d times" % repeat_count(geometry),
    ]

def describe_banks(geometry, names):
    lines = ["Your output images will be like this:"]
    for bank, row in enumerate(names):
        start, end = bank_range(geometry, bank)
        roms = "".join(" rom %d - %s" % (rom, name)
                       for rom, name in enumerate(row))
        lines.append(" - bank %d [0x%08x - 0x%08x]:%s"
                     % (bank, start, end, roms))
    return lines

# Command line ######################################################

class ArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on bad arguments."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, "%s: error: %s\nTry '%s --help' for more information.\n"
                  % (self.prog, message, self.prog))

def parse_int(s):
    """Parse a decimal, 0x hexadecimal, 0o octal, or 0b binary integer."""
    return int(s, 0)
parse_int.__name__ = 'integer'

def parse_argv(argv):
    parser = ArgumentParser(
        prog="romjak",
        description="Splits a binary into images for several ROMs that together form a wider or banked address space."
    )
    parser.add_argument('--version', action='version', version=versionText)
    parser.add_argument("--numroms", metavar="N", type=parse_int,
                        required=True,
                        help="total number of ROMs")
    parser.add_argument("--romsize", metavar="N", type=parse_int,
                        required=True,
                        help="size of a single ROM in bytes")
    parser.add_argument("--romwidth", metavar="N", type=parse_int,
                        help="data bus width of a single ROM in bits (multiple of 8), defaults to 8")
    parser.add_argument("--rombanks", metavar="N", type=parse_int,
                        help="how many banks of ROMs, defaults to 1")
    parser.add_argument("--paduptosize", metavar="N", type=parse_int,
                        help=paduptosize_help)
    parser.add_argument("--preview", metavar="PNGFILE",
                        help="also draw the finished images to a PNG file")
    parser.add_argument("-q", "--quiet", action="store_true",
                        help="don't print the plan or progress")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="show full exception")
    parser.add_argument("input",
                        help="input file")
    parser.add_argument("basename", nargs='?',
                        help="base name for the outputs, defaults to the input path")
    return parser.parse_args(argv[1:])

def open_outputs(stack, names):
    """Open every output for writing inside an ExitStack."""
    outfps = []
    for row in names:
        bank = []
        for filename in row:
            try:
                bank.append(stack.enter_context(open(filename, 'wb')))
            except OSError as e:
                raise OutputOpenError(e.errno, e.strerror, filename)
        outfps.append(bank)
    return outfps

def run(args):
    log = (lambda *a: None) if args.quiet else print
    config = RomConfig(
        num_roms=args.numroms, rom_size=args.romsize,
        rom_width=args.romwidth, num_banks=args.rombanks,
        pad_to_size=args.paduptosize,
    )
    geometry = plan(config)
    basename = args.basename if args.basename is not None else args.input
    names = output_names(basename, geometry)
    log("\n".join(describe_plan(geometry)))
    log("\n".join(describe_banks(geometry, names)))

    try:
        infp = open(args.input, 'rb')
    except OSError as e:
        raise InputOpenError(e.errno, e.strerror, args.input)
    with infp, ExitStack() as stack:
        outfps = open_outputs(stack, names)
        log("Doing it..")
        stripe(geometry, infp, outfps)

    if args.preview:
        from rompreview import save_preview
        save_preview(names, args.preview)
        log("Preview saved to %s" % args.preview)
    log("Done")

def main(argv=None):
    args = parse_argv(argv or sys.argv)
    try:
        run(args)
    except (ValueError, OSError) as e:
        if args.verbose:
            from traceback import print_exc
            print_exc()
        print("romjak: %s" % (e,), file=sys.stderr)
        return 1
    return 0

if __name__=='__main__':
    sys.exit(main())
