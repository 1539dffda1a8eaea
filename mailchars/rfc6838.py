"""Character sets of :rfc:`6838` (Media Type Registration)."""
from mailchars.charsets import Charset

RestrictedToken = Charset.RestrictedToken
