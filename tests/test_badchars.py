from badchars import BADCHAR_HEX_SEQLEN, generate_bad_char_sequence


def test_length():
    assert len(generate_bad_char_sequence()) == BADCHAR_HEX_SEQLEN == 510


def test_content():
    seq = generate_bad_char_sequence()
    assert seq.startswith("010203")
    assert seq.endswith("fdfeff")
    assert "00" not in [seq[i:i + 2] for i in range(0, len(seq), 2)]
    assert bytes.fromhex(seq) == bytes(range(1, 256))


def test_deterministic():
    assert generate_bad_char_sequence() == generate_bad_char_sequence()
