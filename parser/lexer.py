# parser/lexer.py
# This file is part of Veritas - A Propositional Logic Truth Table Generator
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

This module implements tokenization of propositional logic formulas,
breaking input strings into tokens for parser consumption. Multi-character
operators are matched before their shorter prefixes so that ``<!=>`` is
never read as ``<`` followed by ``!``.

Supported Tokens:
- Operators: !, &, |, =>, <=>, <!=>, (, )
- Identifiers: one or more alphanumeric characters

Whitespace is stripped by the parser before tokenizing, so the lexer treats
any remaining whitespace as an illegal character.
"""

from sly import Lexer
from utils.logger import get_logger


class FormulaLexer(Lexer):
    """SLY-based lexer for propositional formula tokenization.

    Attributes:
        tokens: Set of valid token types
        ID: Identifier pattern (letters and digits, no underscore)
    """

    tokens = {
        "ID",
        "NOT",
        "AND",
        "OR",
        "IMPLIES",
        "IFF",
        "XOR",
        "LPAREN",
        "RPAREN",
    }

    # Longest operators first: patterns are tried in definition order
    XOR = r"<!=>"
    IFF = r"<=>"
    IMPLIES = r"=>"
    NOT = r"!"
    AND = r"&"
    OR = r"\|"
    LPAREN = r"\("
    RPAREN = r"\)"

    ID = r"[^\W_]+"

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            ValueError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise ValueError(
            f"Illegal character '{illegal_char}' encountered at position {error_pos}"
        )
