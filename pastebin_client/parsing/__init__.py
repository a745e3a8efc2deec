"""
Response parsers.
"""

from pastebin_client.parsing.paste_list import PasteListParser, ParserState, parse_paste_list

__all__ = ["PasteListParser", "ParserState", "parse_paste_list"]
