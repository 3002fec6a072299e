from .. core.command import CommandName
from .. lexer import CueLexer
from .. tokenizer import CueTokenizer

class Span:
	"""Region of the cue sheet text: [start, end) plus the starting position."""

	def __init__(self, buffer, start, end, position):
		self.buffer = buffer
		self.start = start
		self.end = end
		self.position = position

	def lexer(self):
		return CueLexer(CueTokenizer(self.buffer, self.start, self.end,
			self.position))

	def __len__(self):
		return self.end - self.start

	def __repr__(self):
		return "Span(%d, %d)" % (self.start, self.end)

class RemarkIter:
	"""Yields the REM payloads of a span, re-reading it from its start."""

	def __init__(self, span):
		self.lexer = span.lexer()

	def __iter__(self):
		return self

	def __next__(self):
		while True:
			command = self.lexer.next_command()
			if command is None:
				raise StopIteration
			if command.name == CommandName.REM:
				return command.value
