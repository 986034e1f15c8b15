#!/usr/bin/env python3
import argparse
import sys
from typing import List, Optional

from badchars import generate_bad_char_sequence
from errors import BstError
from hexescape import SYNTAXES, encode, format_warning, syntax_from_name
from sources import dump_file_hex, read_file_as_hex, read_file_verbatim, read_stream, render_hex

__version__ = "0.1.0"

PROGRAM_NAME = "bstrings"


def width_arg(value: str) -> int:
    try:
        width = int(value, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid width: '{value}' (expected a number of bytes)")
    if width < 0:
        raise argparse.ArgumentTypeError(f"invalid width: '{value}' (must be 0 or more)")
    return width


def syntax_arg(value: str) -> str:
    try:
        return syntax_from_name(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Convert input to specified binary string format.",
        epilog="At least one of -D, -x or -b must be given.",
    )

    actions = ap.add_argument_group("actions")
    actions.add_argument("-D", "--dump-file", metavar="FILE",
                         help="Dump content of file FILE in hexadecimal format "
                              "(with -x: escape every byte of FILE)")
    actions.add_argument("-x", "--hex-escape", action="store_true",
                         help="Escape input hexadecimal string")
    actions.add_argument("-b", "--gen-badchar", action="store_true",
                         help="Generate a bad character sequence string")

    opts = ap.add_argument_group("options")
    opts.add_argument("-f", "--file", metavar="FILE",
                      help="Read input from file FILE instead of stdin")
    opts.add_argument("-a", "--asm", metavar="FILE",
                      help="Assemble x86 source FILE and escape the machine code")
    opts.add_argument("--bits", type=int, choices=[32, 64], default=32,
                      help="Assembler mode for -a (default: 32)")
    opts.add_argument("-w", "--width", metavar="BYTES", type=width_arg,
                      help="Break binary strings to specified length in bytes")
    opts.add_argument("-s", "--syntax", metavar="LANG", type=syntax_arg,
                      default=syntax_from_name(None),
                      help=f"Syntax of the binary string output ({', '.join(SYNTAXES)})")
    opts.add_argument("--interactive", action="store_true",
                      help="Enter interactive mode")
    opts.add_argument("--verbose", dest="verbose", action="store_true", default=False,
                      help="Enable verbose output")
    opts.add_argument("--quiet", dest="verbose", action="store_false",
                      help="Disable verbose output")
    opts.add_argument("--version", action="store_true",
                      help="Print version information")
    return ap


def print_version(stream=None) -> None:
    if stream is None:
        stream = sys.stderr
    print(f"Binary String Toolkit ({__version__})", file=stream)
    print(f'For help enter "{PROGRAM_NAME} --help"', file=stream)


def emit(data, args) -> None:
    width = args.width or 0
    text, invalid = encode(data, args.syntax, width,
                           verbose=args.verbose, interactive=args.interactive)
    sys.stdout.write(text)
    if args.verbose and invalid > 0:
        print(format_warning(invalid))


def announce(args, what: str) -> None:
    if not args.verbose:
        return
    print(f"[*] {what}")
    if args.width is not None:
        print(f"[+] Binary string width is limited to {args.width} bytes.")


def hex_escape(args) -> None:
    announce(args, "Convert hexadecimal input to an escaped binary string.")

    if args.dump_file:
        data = read_file_as_hex(args.dump_file)
    elif args.asm:
        from assembler import assemble_file

        code, count = assemble_file(args.asm, bits=args.bits)
        if args.verbose:
            print(f"[+] Encoded {count} instructions ({len(code)} bytes).")
        data = render_hex(code)
    elif args.file:
        data = read_file_verbatim(args.file)
    else:
        data = read_stream(interactive=args.interactive)

    emit(data, args)


def gen_badchar(args) -> None:
    announce(args, "Generating bad character binary string.")
    emit(generate_bad_char_sequence(), args)


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    if args.version:
        print_version()
        return 0

    try:
        if args.hex_escape:
            hex_escape(args)
        elif args.dump_file:
            dump_file_hex(args.dump_file)
        elif args.gen_badchar:
            gen_badchar(args)
        else:
            ap.print_usage(sys.stdout)
    except BstError as e:
        sys.stdout.flush()
        print(e, file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
