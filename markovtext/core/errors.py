class MarkovError(Exception):
    """Base class for model errors."""


class ModelStateError(MarkovError):
    """Operation called in the wrong phase (build vs. generate)."""


class MissingStateError(MarkovError):
    """Generator reached a prefix that was never recorded.

    This is a defect in the model, not something callers should recover from.
    """

    def __init__(self, prefix):
        self.prefix = tuple(prefix)
        super().__init__(f"no state recorded for prefix {self.prefix!r}")


class UnknownPrefixError(MarkovError):
    def __init__(self, words):
        self.words = tuple(words)
        super().__init__(f"prefix {' '.join(self.words)!r} does not occur in the input")


class RandomSourceExhausted(MarkovError):
    pass
