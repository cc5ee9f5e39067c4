from typing import Iterable, Iterator

# same width as a 100-byte buffer read with "%99s"
DEFAULT_MAX_LEN = 99


def scan_tokens(lines: Iterable[str], max_len: int = DEFAULT_MAX_LEN) -> Iterator[str]:
    """Yield whitespace-delimited tokens from an iterable of text lines.

    A token longer than ``max_len`` is cut into consecutive ``max_len``-sized
    pieces, the remainder becoming the next token.
    """
    if max_len < 1:
        raise ValueError(f"max_len must be >= 1, got {max_len}")
    for line in lines:
        for word in line.split():
            for i in range(0, len(word), max_len):
                yield word[i:i+max_len]


def scan_text(text: str, max_len: int = DEFAULT_MAX_LEN) -> Iterator[str]:
    return scan_tokens(text.splitlines(), max_len=max_len)
