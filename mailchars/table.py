"""
Per-codepoint classification table for US-ASCII.

:data:`US_ASCII_LOOKUP` holds one byte for every codepoint in
``[0, 128)``.  Each bit of the byte says whether the codepoint belongs
to one of the character sets below.  The table is built once when this
module is imported and is never modified afterwards.

The ``*text`` sets are merged with :data:`~mailchars.syntax.WSP` since
every production that uses them repeats them interleaved with folding
white space: ``*([FWS] dtext) [FWS]``.  A parser can then consume
characters which are content OR white space with a single test and only
has to look at a ``"\\r"`` (which is *not* in any of the sets) to handle
a soft line break.

"""
import logging

from mailchars import syntax


_logger = logging.getLogger(__name__)

QC = 0x01
"""``qtext`` + ``WSP`` (:rfc:`5322`)"""

CT = 0x02
"""``ctext`` + ``WSP`` (:rfc:`5322`)"""

DT = 0x04
"""``dtext`` + ``WSP`` (:rfc:`5322`)"""

AT = 0x08
"""``atext`` (:rfc:`5322`)"""

RT = 0x10
"""``restricted-name-chars`` (:rfc:`6838`)"""

TO = 0x20
"""``token`` (:rfc:`2045`)"""

NC = 0x40
"""``obs-NO-WS-CTL`` (:rfc:`5322`)"""

HT = 0x80
"""``tchar`` (:rfc:`7230`)"""

TABLE_SIZE = 0x80
"""Number of codepoints covered by the table."""

PRODUCTIONS = (
    (QC, syntax.QTEXT + syntax.WSP),
    (CT, syntax.CTEXT + syntax.WSP),
    (DT, syntax.DTEXT + syntax.WSP),
    (AT, syntax.ATEXT),
    (RT, syntax.RESTRICTED_NAME_CHARS),
    (TO, syntax.MIME_TOKEN),
    (NC, syntax.OBS_NO_WS_CTL),
    (HT, syntax.TCHAR),
)
"""Pairs of bit and the characters that have the bit set."""


def build_table(productions):
    """
    Build a lookup table from `productions`.

    :param productions: iterable of ``(bit, characters)`` pairs
    :return: one mask byte per US-ASCII codepoint
    :rtype: bytes
    :raises ValueError: if a production contains a character that
        is outside of US-ASCII

    """
    table = bytearray(TABLE_SIZE)
    for bit, characters in productions:
        for character in characters:
            codepoint = ord(character)
            if codepoint >= TABLE_SIZE:
                raise ValueError(
                    '{0!r} is not a US-ASCII character'.format(character))
            table[codepoint] |= bit
    return bytes(table)


US_ASCII_LOOKUP = build_table(PRODUCTIONS)
"""Immutable classification table indexed by codepoint."""

_logger.debug('built US-ASCII lookup table - %s', US_ASCII_LOOKUP.hex())
