"""MinHash signatures for approximating Jaccard similarity."""

from __future__ import annotations

import hashlib
from collections import Counter
from dataclasses import dataclass, field

import numpy as np

from integraum.core.config import Settings, get_settings
from integraum.similarity.base import Tokens
from integraum.similarity.tokenizer import Tokenizer

MERSENNE_PRIME = (1 << 31) - 1


def stable_token_hash(token: str) -> int:
    """Process-independent hash of a token, below MERSENNE_PRIME."""
    digest = hashlib.blake2b(token.encode("utf-8"), digest_size=8).digest()
    return int.from_bytes(digest, "big") % MERSENNE_PRIME


class MinHash:
    """A family of ``num_functions`` universal hash functions ``(a*x + b) mod p``."""

    def __init__(self, num_functions: int = 16, seed: int = 42):
        if num_functions < 1:
            raise ValueError(f"num_functions must be >= 1, got {num_functions}")
        rng = np.random.default_rng(seed)
        self.a = rng.integers(1, MERSENNE_PRIME, size=num_functions, dtype=np.int64)
        self.b = rng.integers(0, MERSENNE_PRIME, size=num_functions, dtype=np.int64)

    @property
    def num_functions(self) -> int:
        return len(self.a)

    def signature(self, tokens: Tokens) -> np.ndarray:
        """Minimum hash value per function; empty inputs get the all-p signature."""
        if not tokens:
            return np.full(self.num_functions, MERSENNE_PRIME, dtype=np.int64)
        hashes = np.fromiter(
            (stable_token_hash(token) for token in set(tokens)), dtype=np.int64
        )
        values = (np.outer(hashes, self.a) + self.b) % MERSENNE_PRIME
        return values.min(axis=0)

    @staticmethod
    def similarity(left: np.ndarray, right: np.ndarray) -> float:
        """Fraction of signature slots that agree."""
        return float(np.mean(left == right))


@dataclass
class LocalitySensitiveHashing:
    """Jaccard approximation through MinHash signatures.

    With bag semantics, repeated tokens are made distinct by their occurrence
    number before hashing, so multiplicities influence the signature.
    """

    tokenizer: Tokenizer = field(default_factory=Tokenizer)
    bag: bool = False
    num_functions: int = 16
    seed: int = 42
    minhash: MinHash = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.minhash = MinHash(self.num_functions, self.seed)

    @classmethod
    def from_settings(
        cls, settings: Settings | None = None, bag: bool = False
    ) -> LocalitySensitiveHashing:
        settings = settings or get_settings()
        return cls(
            tokenizer=Tokenizer.from_settings(settings),
            bag=bag,
            num_functions=settings.minhash_functions,
            seed=settings.minhash_seed,
        )

    def signature(self, value: str | Tokens | None) -> np.ndarray:
        return self.minhash.signature(self._tokens(value))

    def calculate(self, left: str | Tokens | None, right: str | Tokens | None) -> float:
        return MinHash.similarity(self.signature(left), self.signature(right))

    def _tokens(self, value: str | Tokens | None) -> list[str]:
        if value is None:
            return []
        tokens = self.tokenizer.tokenize(value) if isinstance(value, str) else list(value)
        if not self.bag:
            return tokens
        counts: Counter[str] = Counter()
        numbered = []
        for token in tokens:
            counts[token] += 1
            numbered.append(f"{token}\x00{counts[token]}")
        return numbered
