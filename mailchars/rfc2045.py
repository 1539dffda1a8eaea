"""Character sets of :rfc:`2045` (MIME Part One)."""
from mailchars.charsets import Charset

Token = Charset.Token
