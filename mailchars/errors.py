"""
Things that make mailchars frown.

Every character is a valid input for the classifier, so the only
thing that is ever raised is a complaint about a value that is not a
single character at all.

"""


class MailCharsException(Exception):
    """Root of all mailchars generated exceptions."""


class NotACharacter(MailCharsException, TypeError):
    """
    The value passed to the classifier is not a single character.

    :param lexeme: the offending value

    This is a :exc:`TypeError` as well so that it behaves the same way
    that :func:`ord` does for the same value.

    """

    def __init__(self, lexeme):
        super(NotACharacter, self).__init__(
            'expected a single character, got {0!r}'.format(lexeme))
        self.lexeme = lexeme
