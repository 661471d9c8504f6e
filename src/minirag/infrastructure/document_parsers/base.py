"""Parse result shared by document parsers."""


class ParseResult:
    """Result of parsing a file: extracted text and page count when known."""

    __slots__ = ("text", "page_count")

    def __init__(self, text: str, page_count: int | None = None) -> None:
        self.text = text
        self.page_count = page_count
