import pytest

pytest.importorskip("keystone")

from assembler import assemble, assemble_file  # noqa: E402
from errors import AssemblyError, InputFileError  # noqa: E402


def test_assemble_32():
    code, count = assemble("xor eax, eax; ret")
    assert code == b"\x31\xc0\xc3"
    assert count == 2


def test_assemble_64():
    code, _ = assemble("xor rax, rax", bits=64)
    assert code == b"\x48\x31\xc0"


def test_assemble_file(tmp_path):
    src = tmp_path / "nop.asm"
    src.write_text("nop\nnop\nret\n")
    assert assemble_file(str(src))[0] == b"\x90\x90\xc3"


def test_bad_instruction():
    with pytest.raises(AssemblyError):
        assemble("frobnicate eax")


def test_missing_file(tmp_path):
    with pytest.raises(InputFileError):
        assemble_file(str(tmp_path / "missing.asm"))


def test_bad_mode():
    with pytest.raises(ValueError):
        assemble("nop", bits=16)
