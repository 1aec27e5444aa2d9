"""Token-based Jaccard similarity with set or bag semantics."""

from collections import Counter
from dataclasses import dataclass, field

from integraum.similarity.base import Tokens
from integraum.similarity.tokenizer import Tokenizer


def jaccard_similarity(left: Tokens, right: Tokens, bag: bool = False) -> float:
    """Jaccard similarity of two token lists.

    Set semantics: ``|A ∩ B| / |A ∪ B|``, ranging up to 1.
    Bag semantics: ``|A ∩ B| / (|A| + |B|)`` with multiset intersection,
    ranging up to 1/2.
    Two empty inputs are identical and score the maximum of their semantics.
    """
    if bag:
        total = len(left) + len(right)
        if total == 0:
            return 0.5
        overlap = sum((Counter(left) & Counter(right)).values())
        return overlap / total

    left_set, right_set = set(left), set(right)
    union = left_set | right_set
    if not union:
        return 1.0
    return len(left_set & right_set) / len(union)


@dataclass(frozen=True)
class Jaccard:
    """Jaccard similarity; strings are tokenized first, token lists used as-is."""

    tokenizer: Tokenizer = field(default_factory=Tokenizer)
    bag: bool = False

    def calculate(self, left: str | Tokens | None, right: str | Tokens | None) -> float:
        return jaccard_similarity(self._tokens(left), self._tokens(right), self.bag)

    def _tokens(self, value: str | Tokens | None) -> Tokens:
        if value is None:
            return []
        if isinstance(value, str):
            return self.tokenizer.tokenize(value)
        return value
