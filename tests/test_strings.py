import unittest
import warnings
from utilkit import strings

class TestTrim(unittest.TestCase):
    def test_trim_whitespace(self):
        result = strings.trim('  \t hello world \n')
        self.assertEqual(result, 'hello world')

    def test_trim_bom_and_nbsp(self):
        result = strings.trim('\ufeff\xa0hello\xa0\ufeff')
        self.assertEqual(result, 'hello')

    def test_trim_keeps_inner_whitespace(self):
        result = strings.trim(' a \xa0 b ')
        self.assertEqual(result, 'a \xa0 b')

class TestPascalize(unittest.TestCase):
    def test_pascalize_dashes(self):
        self.assertEqual(strings.pascalize('foo-bar'), 'FooBar')

    def test_pascalize_constant(self):
        self.assertEqual(strings.pascalize('FOO_BAR'), 'FooBar')

    def test_pascalize_mixed_delimiters(self):
        self.assertEqual(strings.pascalize('foo  bar_-baz'), 'FooBarBaz')

    def test_pascalize_no_delimiters(self):
        self.assertEqual(strings.pascalize('encodeURIComponent'), 'EncodeURIComponent')

    def test_pascalize_mixed_case_constant(self):
        self.assertEqual(strings.pascalize('Foo_BAR'), 'FooBAR')

    def test_pascalize_trailing_delimiter(self):
        self.assertEqual(strings.pascalize('foo-'), 'Foo-')

    def test_pascalize_coerces(self):
        self.assertEqual(strings.pascalize(42), '42')

    def test_pascalize_empty(self):
        self.assertEqual(strings.pascalize(''), '')

class TestCamelize(unittest.TestCase):
    def test_camelize(self):
        self.assertEqual(strings.camelize('foo_bar baz'), 'fooBarBaz')

    def test_camelize_constant(self):
        self.assertEqual(strings.camelize('MAX_VALUE'), 'maxValue')

class TestDasherize(unittest.TestCase):
    def test_dasherize_acronym(self):
        self.assertEqual(strings.dasherize('encodeURIComponent'), 'encode-uri-component')

    def test_dasherize_trailing_acronym(self):
        self.assertEqual(strings.dasherize('parseURL'), 'parse-url')

    def test_dasherize_camel_case(self):
        self.assertEqual(strings.dasherize('fooBar'), 'foo-bar')

    def test_dasherize_delimited(self):
        self.assertEqual(strings.dasherize('foo_bar baz'), 'foo-bar-baz')

    def test_dasherize_constant(self):
        self.assertEqual(strings.dasherize('FOO_BAR'), 'foo-bar')

    def test_dasherize_strips_trailing_dash(self):
        self.assertEqual(strings.dasherize('foo-'), 'foo')

class TestConstantize(unittest.TestCase):
    def test_constantize(self):
        self.assertEqual(strings.constantize('foo-bar'), 'FOO_BAR')

    def test_constantize_camel_case(self):
        self.assertEqual(strings.constantize('encodeURIComponent'), 'ENCODE_URI_COMPONENT')

    def test_constanize_is_deprecated(self):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter('always')
            result = strings.constanize('foo-bar')
        self.assertEqual(result, 'FOO_BAR')
        self.assertTrue(any(issubclass(w.category, DeprecationWarning) for w in caught))

class TestPluralize(unittest.TestCase):
    def test_pluralize_y(self):
        self.assertEqual(strings.pluralize('category'), 'categories')

    def test_pluralize_default(self):
        self.assertEqual(strings.pluralize('cat'), 'cats')

    def test_pluralize_inner_y(self):
        self.assertEqual(strings.pluralize('yak'), 'yaks')

class TestPad(unittest.TestCase):
    def test_pad(self):
        self.assertEqual(strings.pad('5', '0', 3), '005')

    def test_pad_right(self):
        self.assertEqual(strings.pad_right('5', '0', 3), '500')

    def test_pad_at_length(self):
        self.assertEqual(strings.pad('123', '0', 3), '123')
        self.assertEqual(strings.pad_right('123', '0', 3), '123')

    def test_pad_beyond_length(self):
        self.assertEqual(strings.pad('12345', '0', 3), '12345')
        self.assertEqual(strings.pad_right('12345', '0', 3), '12345')

    def test_pad_coerces(self):
        self.assertEqual(strings.pad(7, ' ', 4), '   7')
