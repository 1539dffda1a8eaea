"""
Character classification for mail related grammars.

Tells you if a character is valid in ``atext``, ``ctext``, ``dtext``,
a MIME ``token`` and so on.  The character sets are also available
grouped by the RFC that defines them, e.g. ``mailchars.rfc5322.AText``
is :attr:`mailchars.Charset.AText`.

"""
from mailchars.charsets import (Charset, LookupResult, is_vchar, is_ws,
                                lookup, matches, matches_or_non_ascii)
from mailchars import rfc2045, rfc5322, rfc6838, rfc7230

version_info = (0, 1, 0)
__version__ = '.'.join(str(x) for x in version_info)

__all__ = [
    'Charset',
    'LookupResult',
    'is_vchar',
    'is_ws',
    'lookup',
    'matches',
    'matches_or_non_ascii',
    'rfc2045',
    'rfc5322',
    'rfc6838',
    'rfc7230',
]
