"""Test cases for text normalization functionality."""

import unittest

from docx_writer.utils.text_normalizer import TextNormalizer


class TextNormalizerTest(unittest.TestCase):
    """Test text normalization utilities."""

    def setUp(self):
        """Set up test fixtures."""
        self.normalizer = TextNormalizer(preserve_whitespace=False)
        self.preserve_normalizer = TextNormalizer(preserve_whitespace=True)

    def test_whitespace_normalization(self):
        """Test whitespace collapsing and trimming."""
        test_cases = [
            ('  multiple   spaces  ', 'multiple spaces'),
            ('\t\ttabs\t\t', 'tabs'),
            ('\n\nnewlines\n\n', 'newlines'),
            ('   mixed \t\n\r  whitespace   ', 'mixed whitespace'),
            ('', ''),
            ('   ', ''),
            ('no extra spaces', 'no extra spaces'),
        ]

        for input_text, expected in test_cases:
            result = self.normalizer.normalize_text(input_text)
            self.assertEqual(result, expected, f"Failed for input: {repr(input_text)}")

    def test_preserve_whitespace_mode(self):
        """Test that whitespace preservation works correctly."""
        input_text = '  multiple   spaces  '

        self.assertEqual(self.normalizer.normalize_text(input_text), 'multiple spaces')
        self.assertEqual(self.preserve_normalizer.normalize_text(input_text), input_text)

    def test_control_character_removal(self):
        """Test removal of characters XML 1.0 cannot carry."""
        input_text = 'text\x00with\x08control\x1fchars\ufffe'
        self.assertEqual(self.normalizer.normalize_text(input_text), 'textwithcontrolchars')

    def test_allowed_control_characters_survive(self):
        """Tab, newline and carriage return are legal XML characters."""
        input_text = 'a\tb\nc\rd'
        self.assertEqual(self.preserve_normalizer.normalize_text(input_text), input_text)

    def test_none_and_empty(self):
        self.assertEqual(self.normalizer.normalize_text(None), '')
        self.assertEqual(self.preserve_normalizer.normalize_text(''), '')

    def test_normalize_many_drops_empty_values(self):
        values = ['alpha', '\x00', '  beta  ', '']
        self.assertEqual(self.normalizer.normalize_many(values), ('alpha', 'beta'))


if __name__ == '__main__':
    unittest.main()
