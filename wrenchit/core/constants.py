"""
Patterns and constants shared by the cleaning transforms.
"""

import re

BOM = "\ufeff"
QUOTE = '"'

# A slash run never starts right after one of these characters, which keeps
# URLs, domains and identifiers such as ``example.com/"`` intact. The colon is
# deliberately absent: ``:///"`` is an export artifact, never a real URL.
WORD_LIKE_CLASS = r"[A-Za-z0-9._-]"
NOT_AFTER_WORD = rf"(?<!{WORD_LIKE_CLASS})"

# /"key/"  //"v//"  ///"x///"  \/"k\/"  \\/"v\\/"
SYMMETRIC_SLASHES = re.compile(NOT_AFTER_WORD + r'[\\/]+(")([^"]*?)[\\/]+(")')
# ///"key  \/"key  (slashes dropped, quote kept)
LEADING_SLASHES = re.compile(NOT_AFTER_WORD + r'[\\/]+(?=")')
# Forward slashes only, used by the one-pass strategy.
LEADING_FORWARD_SLASHES = re.compile(NOT_AFTER_WORD + r'/+(?=")')
# "CommerceId/" but never "https://example.com/"
TRAILING_SLASHES = re.compile(r'"([^"/]*)/+"')

# Applied in this order, first occurrence only.
LEADING_SLASH_LITERALS = ('///"', '//"', '/"')

WRAPPED_OBJECT = re.compile(r'\A"(\{.*\})"\Z', re.DOTALL)
WRAPPED_ARRAY = re.compile(r'\A"(\[.*\])"\Z', re.DOTALL)
TRAILING_COMMA = re.compile(r",[\s\ufeff]*([}\]])")
CRLF = re.compile(r"\r\n?")

BRACKET_PAIRS = (("{", "}"), ("[", "]"))

MAX_UNESCAPE_PASSES = 5
MAX_UNQUOTE_PASSES = 10_000
DEFAULT_REGEX_TIMEOUT = 5

NO_STRATEGY_MATCHED = "No cleaning strategy produced valid JSON."
