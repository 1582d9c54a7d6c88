"""UTF-8 aware helpers for force-splitting oversized words."""


def utf8_prefix(text: str, max_bytes: int) -> str:
    """
    Return the longest prefix of text whose UTF-8 encoding fits max_bytes.

    Never cuts a multi-byte character in half. May return an empty string
    when even the first character does not fit.
    """
    if max_bytes <= 0:
        return ""

    encoded = text.encode("utf-8")
    if len(encoded) <= max_bytes:
        return text

    # Dropping a partial trailing sequence keeps the prefix valid UTF-8
    return encoded[:max_bytes].decode("utf-8", "ignore")


def next_piece(word: str, max_bytes: int) -> tuple[str, str]:
    """
    Cut the head off a word so it fits within max_bytes.

    At least one character is always taken, so repeated calls make
    progress even when max_bytes is smaller than a single character.

    Args:
        word: The word to cut (non-empty).
        max_bytes: Byte budget for the head piece.

    Returns:
        Tuple of (piece, rest).
    """
    piece = utf8_prefix(word, max_bytes) or word[0]
    return piece, word[len(piece):]
