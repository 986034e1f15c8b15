from typing import Tuple

from keystone import Ks, KsError, KS_ARCH_X86, KS_MODE_32, KS_MODE_64

from errors import AssemblyError, InputFileError

MODES = {
    32: KS_MODE_32,
    64: KS_MODE_64,
}


def assemble(code: str, bits: int = 32, name: str = "<code>") -> Tuple[bytes, int]:
    """
    Assembles x86 source (instructions separated by ';' or newlines)
    and returns (machine code, number of encoded statements).
    """
    if bits not in MODES:
        raise ValueError(f"Unsupported mode: {bits} (expected 32 or 64)")

    ks = Ks(KS_ARCH_X86, MODES[bits])
    try:
        encoding, count = ks.asm(code)
    except KsError as e:
        raise AssemblyError(name, str(e)) from e

    if not encoding:
        return b"", count or 0
    return bytes(encoding), count


def assemble_file(filename: str, bits: int = 32) -> Tuple[bytes, int]:
    try:
        with open(filename, "r", encoding="utf-8", errors="replace") as f:
            code = f.read()
    except OSError as e:
        raise InputFileError(filename) from e
    return assemble(code, bits=bits, name=filename)
