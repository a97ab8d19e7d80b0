"""
Share link codec

Lines text is packed with a fixed prefix-free table tuned for move
notation (space is the most common symbol and gets a single bit), then
base64'd for the URL.

Packed layout:

    [pad count byte] [codeword bits ... 0-padding to a byte boundary]

The leading byte says how many of the final bits are padding. Without it,
trailing zero padding would decode as spaces, since " " is "0".
"""

import base64
import binascii
import logging
from urllib.parse import quote, unquote

from linetree.exceptions import CodecError

logger = logging.getLogger(__name__)

# fmt: off
TABLE = {
    "\n": "11000",
    " ": "0",
    "+": "1101011",
    "-": "11001",
    "0": "111110000",
    "1": "11010100",
    "2": "111110001",
    "3": "11111001",
    "4": "11100",
    "5": "10111",
    "6": "10100",
    "7": "110100",
    "8": "10110100",
    ":": "101100",
    "?": "11111010",
    "B": "111100",
    "K": "1011011110",
    "N": "11011",
    "O": "10110101",
    "Q": "111111",
    "R": "10110110",
    "a": "11111011",
    "b": "111101",
    "c": "10101",
    "d": "1000",
    "e": "11101",
    "f": "11010101",
    "g": "1011011111",
    "h": "101101110",
    "x": "1001",
}
# fmt: on

CODE_TO_CHAR = {code: char for char, code in TABLE.items()}
MAX_CODE_LENGTH = max(len(code) for code in TABLE.values())


def unsupported_chars(text: str) -> list[str]:
    return sorted({char for char in text if char not in TABLE})


def encode(text: str) -> str:
    """
    Text ➤ bit string like "1110101...". Characters outside the table are
    dropped, so e.g. "Bb5!" encodes the same as "Bb5".
    """
    if dropped := unsupported_chars(text):
        logger.debug("Dropping unsupported characters: %s", "".join(dropped))
    return "".join(TABLE[char] for char in text if char in TABLE)


def decode(bits: str) -> str:
    """Greedy scan; leftover bits that never complete a codeword are ignored."""
    output = []
    buffer = ""
    for bit in bits:
        buffer += bit
        if char := CODE_TO_CHAR.get(buffer):
            output.append(char)
            buffer = ""
        elif len(buffer) > MAX_CODE_LENGTH:
            # can't happen with a complete table, but don't grow forever
            raise CodecError(f"Unknown codeword: {buffer}")

    if buffer:
        logger.debug("Discarding %d trailing bits: %s", len(buffer), buffer)

    return "".join(output)


def pack_bits(bits: str) -> bytes:
    padding = -len(bits) % 8
    padded = bits + "0" * padding
    body = bytes(int(padded[i : i + 8], 2) for i in range(0, len(padded), 8))  # noqa: E203
    return bytes([padding]) + body


def unpack_bits(data: bytes) -> str:
    if not data:
        return ""

    padding, body = data[0], data[1:]
    if padding > 7:
        raise CodecError(f"Bad padding count: {padding}")

    bits = "".join(f"{byte:08b}" for byte in body)
    if padding > len(bits):
        raise CodecError(f"Padding count {padding} exceeds payload")

    return bits[: len(bits) - padding]


def compress(text: str) -> str:
    packed = pack_bits(encode(text))
    token = base64.urlsafe_b64encode(packed).decode("ascii")
    return quote(token, safe="")


def decompress(token) -> str:
    """
    Share token ➤ lines text. An absent or empty token is an empty
    document; anything undecodable raises CodecError.
    """
    if not token:
        return ""

    try:
        raw = unquote(token).encode("ascii")
        data = base64.b64decode(raw, altchars=b"-_", validate=True)
    except (binascii.Error, UnicodeEncodeError) as e:
        raise CodecError(f"Invalid share token: {e}") from e

    return decode(unpack_bits(data))
