"""
Mail and HTTP grammar character sets.

These are taken from :rfc:`5322#section-3.2`, :rfc:`2045#section-5.1`,
:rfc:`6838#section-4.2` and :rfc:`7230#appendix-B`.  Every production
is a :class:`str` of US-ASCII characters.  The obsolete parts of the
:rfc:`5322` grammar are kept out of the text productions and live in
:data:`OBS_NO_WS_CTL`.

"""

ALPHA = 'abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ'
"""
Letters in the ASCII alphabet.

.. productionlist:: core
   ALPHA: %x41-5A / %x61-7A

"""

DIGIT = '0123456789'
"""
Numbers in the ASCII alphabet.

.. productionlist:: core
   DIGIT: %x30-39

"""

WSP = ' \t'
"""
White space, see :rfc:`5234#appendix-B.1`.

.. productionlist:: core
   WSP: SP / HTAB

"""

VCHAR = ''.join(chr(c) for c in range(0x21, 0x7F))
"""
Visible (printing) characters.

.. productionlist:: core
   VCHAR: %x21-7E

"""

ATEXT = ALPHA + DIGIT + "!#$%&'*+-/=?^_`{|}~"
"""
Printable characters not including specials.  Used for atoms.

.. productionlist:: rfc5322
   atext: ALPHA / DIGIT / "!" / "#" / "$" / "%" / "&" / "'" / "*"
        : "+" / "-" / "/" / "=" / "?" / "^" / "_" / "`" / "{" / "|"
        : "}" / "~"

"""

QTEXT = ''.join(c for c in VCHAR if c not in '"\\')
"""
Characters of a quoted string that do not need a quoted-pair.

.. productionlist:: rfc5322
   qtext: %d33 / %d35-91 / %d93-126

"""

CTEXT = ''.join(c for c in VCHAR if c not in '()\\')
"""
Characters of a comment that do not need a quoted-pair.

.. productionlist:: rfc5322
   ctext: %d33-39 / %d42-91 / %d93-126

"""

DTEXT = ''.join(c for c in VCHAR if c not in '[]\\')
"""
Characters of a domain literal.

.. productionlist:: rfc5322
   dtext: %d33-90 / %d94-126

"""

OBS_NO_WS_CTL = ''.join(
    chr(c) for c in (list(range(1, 9)) + [11, 12] + list(range(14, 32)) +
                     [127]))
"""
US-ASCII control characters that do not include the carriage return,
line feed, and white space characters.

.. productionlist:: rfc5322
   obs-NO-WS-CTL: %d1-8 / %d11 / %d12 / %d14-31 / %d127

"""

TSPECIALS = '()<>@,;:\\"/[]?='
"""
Characters that must be in a quoted-string to be used within a
parameter value.

.. productionlist:: rfc2045
   tspecials: "(" / ")" / "<" / ">" / "@" / "," / ";" / ":" / "\"
            : <"> / "/" / "[" / "]" / "?" / "="

"""

MIME_TOKEN = ''.join(c for c in VCHAR if c not in TSPECIALS)
"""
Characters that may occur in a MIME token.

.. productionlist:: rfc2045
   token: 1*<any (US-ASCII) CHAR except SPACE, CTLs, or tspecials>

"""

RESTRICTED_NAME_CHARS = ALPHA + DIGIT + '!#$&-^_.+'
"""
Characters that may occur in a registered media type or subtype name.

.. productionlist:: rfc6838
   restricted-name-chars: ALPHA / DIGIT / "!" / "#" / "$" / "&" / "-"
                        : "^" / "_" / "." / "+"

"""

TCHAR = "!#$%&'*+-.^_`|~" + DIGIT + ALPHA
"""
Characters that may occur in an HTTP token.

.. productionlist:: rfc7230
   tchar: "!" | "#" | "$" | "%" | "&" | "'" | "*" | "+" | "-"
        | "." | "^" | "_" | "`" | "|" | "~" | `DIGIT` | `ALPHA`
   token: 1* `tchar`

"""
