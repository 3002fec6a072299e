import collections

from . core.cuestr import CueStr
from . errors import CueStrError

# zero width no-break space, aka byte order mark
ZWNBSP = "\ufeff"

Position = collections.namedtuple("Position", "line column")

class Token:
	(
		LF,
		TEXT
	) = range(2)

	def __init__(self, kind, value=None, position=None):
		self.kind = kind
		self.value = value
		self.position = position

	def is_text(self):
		return self.kind == Token.TEXT

	def is_plain_text(self):
		return self.kind == Token.TEXT and self.value.kind == CueStr.TEXT

	def __repr__(self):
		if self.kind == Token.LF:
			return "Token(LF)"
		return "Token(%r)" % self.value

def is_blank(ch):
	return ch != "\n" and (ch.isspace() or ch == ZWNBSP)

class CueTokenizer:
	"""Splits cue sheet text into line feeds and (quoted) words.

	The tokenizer only ever reads `buffer[cursor:end]`; it never copies or
	modifies it. Columns count characters, not bytes.
	"""

	def __init__(self, buffer, cursor=0, end=None, position=None):
		self.buffer = buffer
		self.cursor = cursor
		self.end = len(buffer) if end is None else end
		self.line, self.column = position or (0, 0)
		self.token_position = self.position()

	def position(self):
		return Position(self.line, self.column)

	def snapshot(self):
		"""Independent copy that continues from the current point."""
		return CueTokenizer(self.buffer, self.cursor, self.end, self.position())

	def at_end(self):
		return self.cursor >= self.end

	def next_token(self):
		"""Returns the next Token, or None at the end of input.

		Raises CueStrError for malformed quoted strings; `token_position`
		then points to the opening quote.
		"""
		self.eat_whitespace()
		self.token_position = self.position()

		if self.cursor >= self.end:
			return None

		ch = self.buffer[self.cursor]
		if ch == "\n":
			token = self.line_feed()
		elif ch == '"':
			token = Token(Token.TEXT, self.quoted_str(), self.token_position)
		else:
			token = Token(Token.TEXT, self.regular_str(), self.token_position)

		self.eat_whitespace()
		return token

	def eat_whitespace(self):
		buffer = self.buffer
		while self.cursor < self.end and is_blank(buffer[self.cursor]):
			self.cursor += 1
			self.column += 1

	def line_feed(self):
		self.cursor += 1
		self.line += 1
		self.column = 0

		return Token(Token.LF, position=self.token_position)

	def quoted_str(self):
		buffer = self.buffer
		start = self.cursor
		has_escape = False

		# opening quote
		self.cursor += 1
		self.column += 1

		while self.cursor < self.end:
			ch = buffer[self.cursor]
			if ch == "\n":
				break

			self.cursor += 1
			self.column += 1

			if ch == '"':
				kind = CueStr.QUOTED_ESCAPED if has_escape else CueStr.QUOTED
				return CueStr(buffer, start, self.cursor, kind)

			if ch == "\\":
				if self.cursor >= self.end or buffer[self.cursor] == "\n":
					break
				if buffer[self.cursor] not in '"\\':
					raise CueStrError(CueStrError.UNESCAPED_SPECIAL_CHAR)

				has_escape = True
				self.cursor += 1
				self.column += 1

		raise CueStrError(CueStrError.MISSING_ENDING_QUOTE)

	def regular_str(self):
		buffer = self.buffer
		start = self.cursor

		while self.cursor < self.end and not buffer[self.cursor].isspace():
			self.cursor += 1
			self.column += 1

		return CueStr(buffer, start, self.cursor, CueStr.TEXT)

	def rest_of_line(self):
		"""Consumes everything up to (not including) the next line feed.

		Returns the [start, end) offsets of the consumed text with
		surrounding whitespace left out.
		"""
		buffer = self.buffer
		start = self.cursor

		while self.cursor < self.end and buffer[self.cursor] != "\n":
			self.cursor += 1
			self.column += 1

		end = self.cursor
		while end > start and is_blank(buffer[end - 1]):
			end -= 1

		return start, end
