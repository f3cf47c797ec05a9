"""Generic 16-bit CRC calculation."""


def _to_bytes(data):
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _reflect(value, width):
    return int(format(value, f"0{width}b")[::-1], 2)


def calculate_crc16(data, init, poly, xor_out, reflect_in, reflect_out):
    """Compute a 16-bit CRC over ``data``.

    ``init`` is the starting register, ``poly`` the generator polynomial,
    ``xor_out`` the final XOR value; ``reflect_in`` and ``reflect_out``
    bit-reverse each input byte and the final register respectively.
    """
    crc = init & 0xFFFF
    poly &= 0xFFFF
    for byte in _to_bytes(data):
        if reflect_in:
            byte = _reflect(byte, 8)
        crc ^= byte << 8
        for _ in range(8):
            crc = ((crc << 1) ^ poly) if crc & 0x8000 else crc << 1
            crc &= 0xFFFF
    if reflect_out:
        crc = _reflect(crc, 16)
    return (crc ^ xor_out) & 0xFFFF


def calc_crc(data):
    """CRC-16 with init 0xFFFF, polynomial 0x8005, reflected in and out."""
    return calculate_crc16(data, 0xFFFF, 0x8005, 0x0000, True, True)