from . core.album_file import AlbumFile, KnownFileType
from . core.command import Command, CommandName, UnknownCommandName
from . core.cuestr import CueStr
from . core.flags import TrackFlag
from . core.numeric import IndexNo, TrackNo
from . core.timestamp import CueTimeStamp
from . core.track import DataType, Track, TrackIndex
from . discid.isrc import Isrc
from . errors import ParseError, ParseErrorKind, ValueParseError
from . tokenizer import CueTokenizer, Token

class CueLexer:
	"""Reads one command (one line) at a time from a tokenizer."""

	def __init__(self, tokenizer):
		if isinstance(tokenizer, str):
			tokenizer = CueTokenizer(tokenizer)

		self.tokenizer = tokenizer

		self.readers = {
			CommandName.CATALOG:	self.read_cue_str,
			CommandName.CDTEXTFILE:	self.read_cue_str,
			CommandName.FILE:	self.read_file,
			CommandName.FLAGS:	self.read_flags,
			CommandName.INDEX:	self.read_index,
			CommandName.ISRC:	self.read_isrc,
			CommandName.PERFORMER:	self.read_cue_str,
			CommandName.POSTGAP:	self.read_timestamp,
			CommandName.PREGAP:	self.read_timestamp,
			CommandName.REM:	self.read_remark,
			CommandName.SONGWRITER:	self.read_cue_str,
			CommandName.TITLE:	self.read_cue_str,
			CommandName.TRACK:	self.read_track,
		}

	def snapshot(self):
		return CueLexer(self.tokenizer.snapshot())

	def position(self):
		return self.tokenizer.position()

	@property
	def buffer(self):
		return self.tokenizer.buffer

	@property
	def cursor(self):
		return self.tokenizer.cursor

	def error(self, kind):
		return ParseError.at(kind, self.tokenizer.token_position)

	def next_token(self):
		try:
			return self.tokenizer.next_token()
		except ValueParseError as err:
			raise ParseError.wrap(err, self.tokenizer.token_position) from err

	def next_command(self):
		"""Returns the next Command, or None at the end of input."""
		while True:
			token = self.next_token()
			if token is None:
				return None
			if token.kind == Token.LF:
				continue
			if not token.is_plain_text():
				raise self.error(ParseErrorKind.INVALID_CUESHEET_FORMAT)

			try:
				name = CommandName.parse(token.value.as_raw())
			except UnknownCommandName:
				raise self.error(ParseErrorKind.UNKNOWN_COMMAND) from None

			return Command(name, self.readers[name](), token.position)

	def convert(self, func, s):
		try:
			return func(s)
		except ValueParseError as err:
			raise ParseError.wrap(err, self.tokenizer.token_position) from err

	def expect_cue_str(self):
		token = self.next_token()
		if token is None or not token.is_text():
			raise self.error(ParseErrorKind.INVALID_COMMAND_FORMAT)
		return token.value

	def expect_str(self):
		token = self.next_token()
		if token is None or not token.is_plain_text():
			raise self.error(ParseErrorKind.INVALID_COMMAND_FORMAT)
		return token.value.as_raw()

	def expect_line_end(self):
		token = self.next_token()
		if token is not None and token.kind != Token.LF:
			raise self.error(ParseErrorKind.INVALID_COMMAND_FORMAT)

	def read_cue_str(self):
		value = self.expect_cue_str()
		self.expect_line_end()
		return value

	def read_timestamp(self):
		value = self.convert(CueTimeStamp.parse, self.expect_str())
		self.expect_line_end()
		return value

	def read_file(self):
		name = self.expect_cue_str()
		file_type = self.convert(KnownFileType.parse, self.expect_str())
		self.expect_line_end()
		return AlbumFile(name, file_type)

	def read_flags(self):
		value = TrackFlag()

		while True:
			token = self.next_token()
			if token is None or token.kind == Token.LF:
				break
			if not token.is_plain_text():
				raise self.error(ParseErrorKind.INVALID_COMMAND_FORMAT)

			value = value | self.convert(TrackFlag.parse, token.value.as_raw())

		# FLAGS followed by nothing but whitespace
		if not value:
			raise self.error(ParseErrorKind.INVALID_COMMAND_FORMAT)

		return value

	def read_index(self):
		index_no = self.convert(IndexNo.parse, self.expect_str())
		timestamp = self.convert(CueTimeStamp.parse, self.expect_str())
		self.expect_line_end()
		return TrackIndex(index_no, timestamp)

	def read_isrc(self):
		value = self.convert(Isrc.parse, self.expect_str())
		self.expect_line_end()
		return value

	def read_remark(self):
		start, end = self.tokenizer.rest_of_line()
		self.expect_line_end()
		return CueStr(self.tokenizer.buffer, start, end, CueStr.TEXT)

	def read_track(self):
		track_no = self.convert(TrackNo.parse, self.expect_str())
		data_type = self.convert(DataType.parse, self.expect_str())
		self.expect_line_end()
		return Track(track_no, data_type)
