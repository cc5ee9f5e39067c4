NONWORD = "\n"  # whitespace never survives scanning, so no real token equals it
NONWORD_ID = 0


class TokenPool:
    """Interned token storage.

    Every distinct token is stored once and referenced by a stable integer id.
    Ids are never reused or released, so two prefixes made from equal words
    always carry equal ids.
    """

    def __init__(self):
        self._ids: dict[str, int] = {NONWORD: NONWORD_ID}
        self._words: list[str] = [NONWORD]

    def intern(self, word: str) -> int:
        tid = self._ids.get(word)
        if tid is None:
            tid = len(self._words)
            self._ids[word] = tid
            self._words.append(word)
        return tid

    def find(self, word: str) -> int | None:
        return self._ids.get(word)

    def text(self, tid: int) -> str:
        return self._words[tid]

    def __len__(self):
        return len(self._words)
