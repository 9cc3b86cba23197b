from padlint_tree_sitter import Token

from .models import TextEdit


class RuleFixer:
    """Builds text edits relative to tokens"""

    @staticmethod
    def insert_text_after(token: Token, text: str) -> TextEdit:
        return TextEdit(range=(token.range[1], token.range[1]), text=text)

    @staticmethod
    def insert_text_before(token: Token, text: str) -> TextEdit:
        return TextEdit(range=(token.range[0], token.range[0]), text=text)

    @staticmethod
    def replace_text_range(start: int, end: int, text: str) -> TextEdit:
        if start > end:
            raise ValueError(f"Invalid edit range ({start}, {end})")
        return TextEdit(range=(start, end), text=text)
