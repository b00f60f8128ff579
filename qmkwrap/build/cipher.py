"""Keyed rotation cipher for the codes embedded in the generated header.

Each character of the text is shifted within printable ASCII by the matching
character of the key, reusing the key cyclically. This keeps codes from sitting
in the header as plain text; it is obfuscation, not encryption.
"""

MIN_CHAR = 32
MAX_CHAR = 126
# Number of printable characters in [MIN_CHAR, MAX_CHAR]
ALPHABET_SIZE = MAX_CHAR - MIN_CHAR + 1


def rotate(text: str, key: str, forward: bool) -> str:
    """Rotate ``text`` by ``key``.

    Args:
        text: Characters to transform, expected within [32, 126]
        key: Rotation key, reused cyclically when shorter than ``text``
        forward: Rotate forward (encode) when True, backward (decode) otherwise

    Returns:
        The rotated string, or an empty string when ``key`` is empty
    """
    if not key:
        return ""

    rotated = []
    for i, char in enumerate(text):
        nc = ord(char) - MIN_CHAR
        nk = ord(key[i % len(key)]) - MIN_CHAR
        if forward:
            nv = (nc + nk) % ALPHABET_SIZE
        else:
            nv = (nc + ALPHABET_SIZE - nk) % ALPHABET_SIZE
        rotated.append(chr(nv + MIN_CHAR))
    return "".join(rotated)


def encode(text: str, key: str) -> str:
    return rotate(text, key, forward=True)


def decode(text: str, key: str) -> str:
    return rotate(text, key, forward=False)


__all__ = ["ALPHABET_SIZE", "MAX_CHAR", "MIN_CHAR", "decode", "encode", "rotate"]
