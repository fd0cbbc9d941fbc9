from typing import Any, Union

__all__ = ["as_bytes", "is_ascii_digit"]


def as_bytes(value: Any) -> Union[bytes, bytearray]:
    """Get the byte sequence that is compared for the given value.

    Binary values are used as they are, memory views are flattened to bytes and
    strings are encoded as UTF-8, which keeps the order of the code points and
    encodes every ASCII digit as a single byte.
    """
    if isinstance(value, (bytes, bytearray)):
        return value
    if isinstance(value, str):
        return value.encode("utf-8", "surrogatepass")
    if isinstance(value, memoryview):
        return value.tobytes()
    raise TypeError(
        f"Can only compare strings or bytes-like objects, not {type(value).__name__}."
    )


def is_ascii_digit(byte: int) -> bool:
    """Check whether the byte is one of the ASCII digits 0 to 9."""
    return 0x30 <= byte <= 0x39
