"""
Character sets of :rfc:`7230` (HTTP/1.1 Message Syntax).

:data:`QDText` is :attr:`~mailchars.charsets.Charset.QTextWs` since
``qdtext`` and :rfc:`5322` ``qtext`` + ``WSP`` are the same when the
obsolete part of both grammars is excluded.

"""
from mailchars.charsets import Charset

QDText = Charset.QTextWs
Token = Charset.Rfc7230Token
