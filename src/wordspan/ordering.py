"""Total ordering derived from a single ``__lt__``."""


class LessThanOrdered:
    """Mixin deriving ``<=``, ``>``, ``>=``, ``==`` and ``!=`` from ``__lt__``.

    Subclasses define ``__lt__`` only. Two values are equal when neither is
    less than the other, so equality follows the ordering key rather than
    the full field set.
    """

    def __lt__(self, other: object) -> bool:
        raise NotImplementedError

    def __le__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return not other < self

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return not self <= other

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return not self < other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return not self < other and not other < self

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result
