"""Pattern-driven parsing of monetary strings into exact minor-unit amounts.

Public API:
    decode - Decode a string against a compiled pattern
    PatternDecoder - Compile a pattern once, decode many strings
    DecoderState - Decoder position relative to the decimal separator

Python 3.13+.
"""

from .decoder import DecoderState, DigitField, PatternDecoder, decode

__all__ = [
    "DecoderState",
    "DigitField",
    "PatternDecoder",
    "decode",
]
