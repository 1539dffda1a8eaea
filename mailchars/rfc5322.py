"""Character sets of :rfc:`5322` (Internet Message Format)."""
from mailchars.charsets import Charset

QTextWs = Charset.QTextWs
CTextWs = Charset.CTextWs
DTextWs = Charset.DTextWs
AText = Charset.AText
ObsNoWsCtl = Charset.ObsNoWsCtl
