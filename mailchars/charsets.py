"""
Character classification for mail related grammar parts.

Use :class:`Charset` to test a character against one of the character
sets that the mail grammars are built from:

>>> Charset.AText.contains('d')
True
>>> matches('d', Charset.AText)
True

If you need to test a character against more than one set, then
classify it once with :func:`lookup` and test the result as often as
you need:

>>> result = lookup('.')
>>> result.is_ascii()
True
>>> result.matches(Charset.Token), result.matches(Charset.CTextWs)
(True, True)
>>> result.matches(Charset.AText)
False

:class:`Charset` is a flag type so members can be combined.  A test
against a combination succeeds if the character is in any of them.
This is how the obsolete part of the :rfc:`5322` grammar is supported:

>>> all(matches(c, Charset.CTextWs | Charset.ObsNoWsCtl)
...     for c in '\\x01 comment \\x02')
True

"""
import collections
import enum

from mailchars import errors
from mailchars.table import (AT, CT, DT, HT, NC, QC, RT, TABLE_SIZE, TO,
                             US_ASCII_LOOKUP)


def _codepoint(ch):
    if not isinstance(ch, str) or len(ch) != 1:
        raise errors.NotACharacter(ch)
    return ord(ch)


def _test_mask(mask, charset, default):
    """Shared membership logic for characters and lookup results."""
    if mask is None:
        return default
    return mask & int(charset) != 0


class Charset(enum.IntFlag):

    """
    Character sets represented through the internal lookup table.

    The value of every member is a distinct bit in the per-character
    mask stored in :data:`mailchars.table.US_ASCII_LOOKUP`.

    """

    QTextWs = QC
    """
    ``qtext`` + ``WSP``, anything which can appear in a quoted string
    that is not a quoted-pair.  This is the same as :rfc:`7230`
    ``qdtext`` if the obsolete part of both grammars is excluded.
    (:rfc:`5322`)
    """

    CTextWs = CT
    """``ctext`` + ``WSP``, excluding the obsolete grammar (:rfc:`5322`)"""

    DTextWs = DT
    """``dtext`` + ``WSP`` (:rfc:`5322`)"""

    AText = AT
    """``atext`` (:rfc:`5322`)"""

    RestrictedToken = RT
    """
    ``restricted-name-chars``, the subset of the :rfc:`2045` token that
    IETF and IANA tokens have to comply with (:rfc:`6838`)
    """

    Token = TO
    """
    ``token`` as defined for MIME parameters and types (:rfc:`2045`).
    There are other mail related definitions of token, see
    :attr:`Rfc7230Token`.
    """

    ObsNoWsCtl = NC
    """
    ``obs-NO-WS-CTL`` (:rfc:`5322`).  Combine it with :attr:`CTextWs`
    or :attr:`QTextWs` to accept the obsolete part of the grammar.
    """

    Rfc7230Token = HT
    """
    ``token`` as defined by HTTP/1.1 (:rfc:`7230`).  Not a mail grammar
    but relevant for anything media type related.
    """

    def contains(self, ch):
        """
        Is `ch` part of this set of characters?

        :param str ch: the character to test
        :rtype: bool

        Characters outside of US-ASCII are never part of the set.

        """
        codepoint = _codepoint(ch)
        if codepoint < TABLE_SIZE:
            return US_ASCII_LOOKUP[codepoint] & self._value_ != 0
        return False

    def contains_or_non_ascii(self, ch):
        """
        Is `ch` part of this set of characters or not US-ASCII?

        :param str ch: the character to test
        :rtype: bool

        This is meant to be used together with :rfc:`6532` which
        extends all ``*text`` productions to contain any non-US-ASCII
        character.

        """
        codepoint = _codepoint(ch)
        if codepoint < TABLE_SIZE:
            return US_ASCII_LOOKUP[codepoint] & self._value_ != 0
        return True

    @staticmethod
    def lookup(ch):
        """
        Classify `ch` using the internal lookup table.

        :param str ch: the character to classify
        :rtype: LookupResult

        """
        codepoint = _codepoint(ch)
        if codepoint < TABLE_SIZE:
            return LookupResult(US_ASCII_LOOKUP[codepoint])
        return LookupResult(None)

    def chars(self):
        """
        Return the US-ASCII characters in this set.

        :return: the characters ordered by codepoint
        :rtype: str

        """
        return ''.join(chr(codepoint)
                       for codepoint, mask in enumerate(US_ASCII_LOOKUP)
                       if mask & self._value_)


class LookupResult(collections.namedtuple('LookupResult', ['mask'])):

    """
    The result of classifying a single character.

    .. attribute:: mask

       The table byte of the character or :data:`None` if the
       character is not US-ASCII.

    A result is a copy of the table entry, it does not refer back to
    the table.  Test it against as many :class:`Charset` values as
    you want.

    >>> result = lookup('↓')
    >>> result.is_ascii(), result.matches(Charset.QTextWs)
    (False, False)
    >>> result.matches_or_non_ascii(Charset.QTextWs)
    True

    """

    __slots__ = ()

    def is_ascii(self):
        """Was the classified character a US-ASCII character?"""
        return self.mask is not None

    def matches(self, charset):
        """
        Did the character belong to `charset`?

        :param Charset charset: set (or combination of sets) to test
        :rtype: bool

        """
        return _test_mask(self.mask, charset, False)

    def matches_or_non_ascii(self, charset):
        """
        Did the character belong to `charset` or was it not US-ASCII?

        :param Charset charset: set (or combination of sets) to test
        :rtype: bool

        """
        return _test_mask(self.mask, charset, True)


lookup = Charset.lookup


def matches(ch, charset):
    """Return :data:`True` if `ch` belongs to `charset`."""
    return charset.contains(ch)


def matches_or_non_ascii(ch, charset):
    """Return :data:`True` if `ch` belongs to `charset` or is not US-ASCII."""
    return charset.contains_or_non_ascii(ch)


def is_ws(ch):
    """Is `ch` a ``WSP`` character (space or horizontal tab)?"""
    return _codepoint(ch) in (0x20, 0x09)


def is_vchar(ch):
    """
    Is `ch` a visible character?

    :param str ch: the character to test
    :rtype: bool

    This is the ``VCHAR`` production of :rfc:`5234`: anything between
    ``"!"`` and ``"~"`` inclusive.

    """
    return 0x20 < _codepoint(ch) <= 0x7E
