"""Deterministic local embedding provider."""

_VOWELS = frozenset("aeiouAEIOU")


class SimpleEmbeddingProvider:
    """Four-dimensional character statistics: length, vowels, consonants, spaces.

    Not semantic; meant for tests and offline runs.
    """

    async def embed(self, text: str) -> list[float]:
        return embed_counts(text)


def embed_counts(text: str) -> list[float]:
    vowels = consonants = spaces = 0
    for ch in text:
        if ch in _VOWELS:
            vowels += 1
        elif ch == " ":
            spaces += 1
        else:
            consonants += 1
    return [float(len(text)), float(vowels), float(consonants), float(spaces)]
