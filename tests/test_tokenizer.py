import pytest

from cueprobe.core import CueStr
from cueprobe.errors import CueStrError
from cueprobe.tokenizer import CueTokenizer, Position, Token

def tokens(text):
	tokenizer = CueTokenizer(text)
	result = []

	while True:
		token = tokenizer.next_token()
		if token is None:
			return result
		result.append(token)

class TestTokenizer:
	def test_kinds_and_positions(self):
		result = tokens('TITLE "a b"\n  REM x\n')

		assert [t.kind for t in result] == [
			Token.TEXT, Token.TEXT, Token.LF, Token.TEXT, Token.TEXT, Token.LF]
		assert [t.position for t in result] == [
			(0, 0), (0, 6), (0, 11), (1, 2), (1, 6), (1, 7)]

		assert result[1].value.kind == CueStr.QUOTED
		assert str(result[1].value) == "a b"

	def test_empty(self):
		assert tokens("") == []
		assert tokens(" \t ") == []

	def test_byte_order_mark(self):
		result = tokens("\ufeffTITLE x")

		assert result[0].value == "TITLE"
		assert result[0].position == Position(0, 1)

	def test_columns_count_characters(self):
		result = tokens("éé x")

		assert result[1].position == Position(0, 3)

	def test_escaped(self):
		result = tokens(r'"say \"hi\""')

		assert result[0].value.kind == CueStr.QUOTED_ESCAPED
		assert str(result[0].value) == 'say "hi"'

	def test_crlf_whitespace(self):
		result = tokens("TITLE x\r\nREM")

		assert [t.kind for t in result] == [Token.TEXT, Token.TEXT, Token.LF, Token.TEXT]

	@pytest.mark.parametrize("text, kind, position", [
		('TITLE "abc\nX', CueStrError.MISSING_ENDING_QUOTE, (0, 6)),
		('"abc', CueStrError.MISSING_ENDING_QUOTE, (0, 0)),
		('x "a\\', CueStrError.MISSING_ENDING_QUOTE, (0, 2)),
		('"a\\q"', CueStrError.UNESCAPED_SPECIAL_CHAR, (0, 0)),
	])
	def test_bad_quoted(self, text, kind, position):
		tokenizer = CueTokenizer(text)

		with pytest.raises(CueStrError) as info:
			while tokenizer.next_token() is not None:
				pass

		assert info.value.kind == kind
		assert tokenizer.token_position == position

class TestSnapshot:
	def test_independent(self):
		tokenizer = CueTokenizer("A B\nC")
		tokenizer.next_token()
		snapshot = tokenizer.snapshot()

		assert tokenizer.next_token().value == "B"
		assert tokenizer.next_token().kind == Token.LF

		token = snapshot.next_token()
		assert token.value == "B"
		assert token.position == (0, 2)

	def test_bounded(self):
		tokenizer = CueTokenizer("A B C", 2, 3, Position(4, 2))

		token = tokenizer.next_token()
		assert token.value == "B"
		assert token.position == (4, 2)
		assert tokenizer.next_token() is None

	def test_rest_of_line(self):
		text = "REM  some  text \t\nX"
		tokenizer = CueTokenizer(text)
		tokenizer.next_token()

		start, end = tokenizer.rest_of_line()
		assert text[start:end] == "some  text"
		assert tokenizer.next_token().kind == Token.LF
