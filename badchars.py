BADCHAR_HEX_SEQLEN = 510    # 255 bytes, two hex digits each


def generate_bad_char_sequence() -> str:
    """
    Builds the bad character test sequence 0x01..0xFF as hex digits
    (lowercase, two per byte), ready to be handed to the encoder.
    """
    return "".join(f"{b:02x}" for b in range(0x01, 0x100))
