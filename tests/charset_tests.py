import unittest

import mailchars
from mailchars import Charset, LookupResult, errors


class WhenTestingCharactersDirectly(unittest.TestCase):

    def test_that_atext_contains_letters(self):
        self.assertTrue(Charset.AText.contains('d'))
        self.assertTrue(mailchars.matches('d', Charset.AText))
        self.assertTrue(Charset.Token.contains('d'))

    def test_that_angle_bracket_is_text_but_not_atext(self):
        self.assertTrue(Charset.QTextWs.contains('<'))
        self.assertTrue(Charset.QTextWs.contains_or_non_ascii('<'))
        self.assertTrue(Charset.CTextWs.contains('<'))
        self.assertFalse(Charset.AText.contains('<'))
        self.assertFalse(Charset.AText.contains_or_non_ascii('<'))

    def test_that_first_character_outside_the_table_is_non_ascii(self):
        self.assertFalse(mailchars.matches('\x80', Charset.CTextWs))
        self.assertTrue(
            mailchars.matches_or_non_ascii('\x80', Charset.CTextWs))

    def test_that_last_character_in_the_table_is_classified(self):
        self.assertTrue(Charset.ObsNoWsCtl.contains('\x7f'))
        self.assertFalse(Charset.QTextWs.contains_or_non_ascii('\x7f'))

    def test_that_whitespace_is_merged_into_text_sets(self):
        for charset in (Charset.QTextWs, Charset.CTextWs, Charset.DTextWs):
            with self.subTest(charset=charset.name):
                self.assertTrue(charset.contains(' '))
                self.assertTrue(charset.contains('\t'))
                self.assertFalse(charset.contains('\r'))

    def test_that_whitespace_is_not_a_token(self):
        for charset in (Charset.AText, Charset.Token,
                        Charset.RestrictedToken, Charset.Rfc7230Token):
            with self.subTest(charset=charset.name):
                self.assertFalse(charset.contains(' '))

    def test_that_combined_sets_match_any_member(self):
        with_obs = Charset.CTextWs | Charset.ObsNoWsCtl
        self.assertTrue(all(with_obs.contains(c)
                            for c in '\x01 comment \x02'))
        self.assertFalse(Charset.CTextWs.contains('\x01'))
        self.assertFalse(with_obs.contains('('))

    def test_that_astral_characters_are_non_ascii(self):
        self.assertFalse(Charset.AText.contains('\U0001F600'))
        self.assertTrue(Charset.AText.contains_or_non_ascii('\U0001F600'))

    def test_that_lone_surrogates_are_non_ascii(self):
        self.assertFalse(Charset.Token.contains('\ud800'))
        self.assertTrue(Charset.Token.contains_or_non_ascii('\ud800'))


class WhenLookingUpCharacters(unittest.TestCase):

    def test_that_ascii_lookup_matches_several_sets(self):
        result = Charset.lookup('<')
        self.assertTrue(result.is_ascii())
        self.assertTrue(result.matches(Charset.QTextWs))
        self.assertTrue(result.matches_or_non_ascii(Charset.QTextWs))
        self.assertTrue(result.matches(Charset.CTextWs))
        self.assertTrue(result.matches_or_non_ascii(Charset.CTextWs))
        self.assertFalse(result.matches(Charset.AText))
        self.assertFalse(result.matches_or_non_ascii(Charset.AText))

    def test_that_non_ascii_lookup_has_no_mask(self):
        result = mailchars.lookup('↓')
        self.assertFalse(result.is_ascii())
        self.assertIsNone(result.mask)
        self.assertFalse(result.matches(Charset.QTextWs))
        self.assertTrue(result.matches_or_non_ascii(Charset.QTextWs))

    def test_that_dot_is_token_and_ctext_but_not_atext(self):
        result = mailchars.lookup('.')
        self.assertTrue(result.is_ascii())
        self.assertTrue(result.matches(mailchars.rfc2045.Token))
        self.assertTrue(result.matches(mailchars.rfc5322.CTextWs))
        self.assertFalse(result.matches(mailchars.rfc5322.AText))

    def test_that_result_is_a_copy_of_the_table_entry(self):
        result = mailchars.lookup('a')
        self.assertIsInstance(result, LookupResult)
        self.assertIsInstance(result.mask, int)
        self.assertEqual(result, LookupResult(result.mask))

    def test_that_equal_results_hash_equal(self):
        self.assertEqual(hash(mailchars.lookup('é')),
                         hash(mailchars.lookup('↓')))
        self.assertEqual(mailchars.lookup('a'), mailchars.lookup('b'))

    def test_that_results_are_immutable(self):
        result = mailchars.lookup('a')
        with self.assertRaises(AttributeError):
            result.mask = 0

    def test_that_lookup_supports_combined_sets(self):
        result = mailchars.lookup('\x0b')
        self.assertFalse(result.matches(Charset.QTextWs))
        self.assertTrue(
            result.matches(Charset.QTextWs | Charset.ObsNoWsCtl))


class WhenListingCharacters(unittest.TestCase):

    def test_that_chars_are_ordered_by_codepoint(self):
        self.assertEqual(Charset.RestrictedToken.chars(),
                         '!#$&+-.0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ^_'
                         'abcdefghijklmnopqrstuvwxyz')

    def test_that_combined_chars_are_the_union(self):
        combined = (Charset.AText | Charset.Token).chars()
        self.assertEqual(set(combined),
                         set(Charset.AText.chars()) |
                         set(Charset.Token.chars()))


class WhenUsingStandalonePredicates(unittest.TestCase):

    def test_that_visible_character_boundaries_are_exact(self):
        self.assertFalse(mailchars.is_vchar(' '))
        self.assertTrue(mailchars.is_vchar('!'))
        self.assertTrue(mailchars.is_vchar('~'))
        self.assertFalse(mailchars.is_vchar('\x7f'))

    def test_that_non_ascii_is_not_a_visible_character(self):
        self.assertFalse(mailchars.is_vchar('é'))

    def test_that_whitespace_is_space_and_tab(self):
        self.assertTrue(mailchars.is_ws(' '))
        self.assertTrue(mailchars.is_ws('\t'))
        self.assertFalse(mailchars.is_ws('\n'))
        self.assertFalse(mailchars.is_ws('a'))
        self.assertFalse(mailchars.is_ws('\u00a0'))


class WhenPassingSomethingThatIsNotACharacter(unittest.TestCase):

    def test_that_strings_of_other_lengths_are_rejected(self):
        for value in ('', 'ab'):
            with self.subTest(value=value):
                with self.assertRaises(errors.NotACharacter) as context:
                    Charset.AText.contains(value)
                self.assertEqual(context.exception.lexeme, value)

    def test_that_rejection_is_a_type_error(self):
        with self.assertRaises(TypeError):
            mailchars.lookup(65)

    def test_that_predicates_reject_strings(self):
        with self.assertRaises(errors.NotACharacter):
            mailchars.is_vchar('!!')
        with self.assertRaises(errors.NotACharacter):
            mailchars.is_ws('  ')

    def test_that_rejection_is_a_mailchars_exception(self):
        with self.assertRaises(errors.MailCharsException):
            mailchars.matches_or_non_ascii(None, Charset.Token)

    def test_that_bytes_are_not_decoded(self):
        for value in (b'a', bytearray(b'!'), bytearray(b'\xe9')):
            with self.subTest(value=value):
                with self.assertRaises(errors.NotACharacter):
                    Charset.AText.contains(value)
                with self.assertRaises(errors.NotACharacter):
                    mailchars.lookup(value)
                with self.assertRaises(errors.NotACharacter):
                    mailchars.is_vchar(value)
                with self.assertRaises(errors.NotACharacter):
                    mailchars.is_ws(value)


class WhenReadingTestResults(unittest.TestCase):

    def test_that_direct_tests_return_plain_booleans(self):
        self.assertIs(Charset.AText.contains('a'), True)
        self.assertIs(Charset.AText.contains_or_non_ascii('<'), False)

    def test_that_lookup_tests_return_plain_booleans(self):
        result = mailchars.lookup('a')
        self.assertIs(result.matches(Charset.AText | Charset.Token), True)
        self.assertIs(result.matches_or_non_ascii(Charset.DTextWs), True)
        self.assertIs(result.matches(Charset.ObsNoWsCtl), False)
