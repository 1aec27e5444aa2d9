"""q-gram tokenization."""

from __future__ import annotations

from dataclasses import dataclass

from integraum.core.config import Settings, get_settings

PAD_START = "#"
PAD_END = "$"


@dataclass(frozen=True)
class Tokenizer:
    """Splits strings into overlapping tokens of ``token_size`` characters.

    With padding the string is framed by ``token_size - 1`` start and end
    markers, so leading and trailing characters take part in as many tokens as
    inner ones. Without padding, strings shorter than the token size become a
    single token.
    """

    token_size: int = 4
    padding: bool = True

    def __post_init__(self) -> None:
        if self.token_size < 1:
            raise ValueError(f"token_size must be >= 1, got {self.token_size}")

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> Tokenizer:
        settings = settings or get_settings()
        return cls(settings.tokenizer_size, settings.tokenizer_padding)

    def tokenize(self, value: str | None) -> list[str]:
        if not value:
            return []
        if self.padding:
            frame = self.token_size - 1
            value = PAD_START * frame + value + PAD_END * frame
        if len(value) <= self.token_size:
            return [value]
        return [value[i : i + self.token_size] for i in range(len(value) - self.token_size + 1)]
