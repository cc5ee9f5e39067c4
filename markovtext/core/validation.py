def is_valid_count(n: int) -> bool:
    return isinstance(n, int) and n >= 0

def is_valid_order(n: int) -> bool:
    return isinstance(n, int) and n >= 1

def is_sentence_start(word: str) -> bool:
    # ASCII capitals only
    return bool(word) and 'A' <= word[0] <= 'Z'
