"""String similarity primitives used by duplicate detection and schema matching."""

from integraum.similarity.base import SimilarityMeasure, Tokens
from integraum.similarity.jaccard import Jaccard, jaccard_similarity
from integraum.similarity.levenshtein import Levenshtein, edit_distance, levenshtein_similarity
from integraum.similarity.minhash import LocalitySensitiveHashing, MinHash, stable_token_hash
from integraum.similarity.tokenizer import Tokenizer

__all__ = [
    "Jaccard",
    "Levenshtein",
    "LocalitySensitiveHashing",
    "MinHash",
    "SimilarityMeasure",
    "Tokenizer",
    "Tokens",
    "edit_distance",
    "jaccard_similarity",
    "levenshtein_similarity",
    "stable_token_hash",
]
