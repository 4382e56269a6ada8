"""Tests for pricebook/ingest/tokenizer.py"""

from pricebook.ingest.tokenizer import format_row, tokenize_row


class TestTokenizeRow:
    def test_plain_fields(self):
        assert tokenize_row("a,b,c") == ["a", "b", "c"]

    def test_fields_are_trimmed(self):
        assert tokenize_row("  a ,\tb,c  ") == ["a", "b", "c"]

    def test_quoted_comma_stays_in_field(self):
        assert tokenize_row('a,"b,c",d') == ["a", "b,c", "d"]

    def test_escaped_quote(self):
        assert tokenize_row('"he said ""hi"""') == ['he said "hi"']

    def test_doubled_quote_inside_quoted_field(self):
        assert tokenize_row('x,"5"" pipe",y') == ["x", '5" pipe', "y"]

    def test_quote_in_middle_of_field_toggles(self):
        # Quotes need not wrap the whole field
        assert tokenize_row('5" pad,"x"y') == ['5 pad,xy']

    def test_empty_line_yields_one_empty_field(self):
        assert tokenize_row("") == [""]

    def test_trailing_comma_yields_empty_last_field(self):
        assert tokenize_row("a,b,") == ["a", "b", ""]

    def test_consecutive_commas(self):
        assert tokenize_row(",,") == ["", "", ""]

    def test_unterminated_quote_swallows_rest_of_line(self):
        assert tokenize_row('a,"b,c,d') == ["a", "b,c,d"]

    def test_whitespace_inside_quotes_is_trimmed_too(self):
        assert tokenize_row('"  padded  ",x') == ["padded", "x"]

    def test_doubled_quote_outside_quotes_is_empty(self):
        assert tokenize_row('a,"",b') == ["a", "", "b"]


class TestFormatRow:
    def test_plain_fields_unquoted(self):
        assert format_row(["a", "b"]) == "a,b"

    def test_comma_field_is_quoted(self):
        assert format_row(["a", "b,c", "d"]) == 'a,"b,c",d'

    def test_quote_field_is_escaped(self):
        assert format_row(['he said "hi"']) == '"he said ""hi"""'

    def test_tokenize_reverses_format(self):
        fields = ["Acme, Inc.", 'Drum 55" tall', "", "$1,234.50"]
        assert tokenize_row(format_row(fields)) == fields
