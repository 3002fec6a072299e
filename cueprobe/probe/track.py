from . builder import TrackProbeBuilder
from . remark import RemarkIter, Span
from .. core.command import CommandName
from .. core.numeric import IndexNo
from .. core.track import TrackIndex
from .. errors import BuildError, ParseError, ParseErrorKind
from .. metadata import RemarkComments

TRACK_FIELDS = {
	CommandName.FLAGS:	"flags",
	CommandName.ISRC:	"isrc",
	CommandName.PERFORMER:	"performer",
	CommandName.POSTGAP:	"postgap",
	CommandName.PREGAP:	"pregap",
	CommandName.SONGWRITER:	"songwriter",
	CommandName.TITLE:	"title",
}

START_INDEX = 1

class TrackProbe:
	"""One track of the cue sheet.

	`start_index` (INDEX 01) is always present, `pregap_index` (INDEX 00)
	and the other fields are None when the cue sheet doesn't set them.
	Sub-indexes and remarks are read on demand from the track's region.
	"""

	def __init__(self, track, span, index_lexer, start_index, pregap_index=None,
		flags=None, isrc=None, performer=None, postgap=None, pregap=None,
		songwriter=None, title=None
	):
		self.track = track
		self.span = span
		self.index_lexer = index_lexer
		self.start_index = start_index
		self.pregap_index = pregap_index
		self.flags = flags
		self.isrc = isrc
		self.performer = performer
		self.postgap = postgap
		self.pregap = pregap
		self.songwriter = songwriter
		self.title = title

	@property
	def track_no(self):
		return self.track.track_no

	@property
	def data_type(self):
		return self.track.data_type

	def sub_indexes(self):
		return TrackSubIndexes(self.index_lexer.snapshot(), self.start_index)

	indexes = sub_indexes

	def remarks(self):
		return RemarkIter(self.span)

	def metadata(self):
		return RemarkComments(self.remarks())

	def __repr__(self):
		return "TrackProbe(%s, %s, start=%s)" % (
			self.track_no, self.data_type, self.start_index)

class TrackListProbe:
	"""Seed of track iteration: lexer right after the first TRACK line."""

	def __init__(self, lexer, track, position):
		self.lexer = lexer
		self.track = track
		self.position = position

	def iter(self):
		return Tracks(self.lexer.snapshot(), self.track, self.position)

class Tracks:
	def __init__(self, lexer, track, position):
		self.lexer = lexer
		self.track = track
		self.track_position = position

	def __iter__(self):
		return self

	def __next__(self):
		probe = self.next_track()
		if probe is None:
			raise StopIteration
		return probe

	def next_track(self):
		"""Reads the current track up to the next TRACK command.

		Returns None once all tracks were read.
		"""
		if self.track is None:
			return None

		track, track_position = self.track, self.track_position
		lexer = self.lexer
		builder = TrackProbeBuilder(TrackProbe, track, lexer.snapshot())
		span_start, span_position = lexer.cursor, lexer.position()
		span_end = span_start

		while True:
			try:
				command = lexer.next_command()
			except ParseError:
				# the lexer stopped mid-line, nothing after it can be read
				self.track = None
				raise

			if command is None:
				self.track = None
				break

			if command.name == CommandName.TRACK:
				# track numbers must be sequential
				if int(command.value.track_no) != int(track.track_no) + 1:
					self.track = None
					raise ParseError.at(ParseErrorKind.INVALID_TRACK_NO,
						command.position)

				self.track = command.value
				self.track_position = command.position
				break

			try:
				self.apply(builder, command)
			except BuildError as err:
				self.track = None
				raise ParseError.at(err.kind, command.position) from err

			span_end = lexer.cursor

		try:
			return builder.build(Span(lexer.buffer, span_start, span_end,
				span_position))
		except BuildError as err:
			self.track = None
			raise ParseError.at(err.kind, track_position) from err

	@staticmethod
	def apply(builder, command):
		if command.name == CommandName.INDEX:
			index_no = int(command.value.index_no)
			if index_no == 0:
				builder.set_pregap_index(command.value.timestamp)
			elif index_no == START_INDEX:
				builder.set_start_index(command.value.timestamp)
			else:
				builder.add_sub_index(command.value)
		elif command.name == CommandName.REM:
			pass
		elif command.name in TRACK_FIELDS:
			builder.set_attr(TRACK_FIELDS[command.name], command.value)
		else:
			raise BuildError(ParseErrorKind.INVALID_COMMAND_USAGE)

class TrackSubIndexes:
	"""INDEX 02 and up of one track.

	Numbers have to follow each other by one starting from INDEX 01 and
	timestamps may not go backwards.
	"""

	def __init__(self, lexer, start_index):
		self.lexer = lexer
		self.previous = TrackIndex(IndexNo(START_INDEX), start_index)
		self.finished = False

	def __iter__(self):
		return self

	def __next__(self):
		index = self.next_index()
		if index is None:
			raise StopIteration
		return index

	def next_index(self):
		while not self.finished:
			try:
				command = self.lexer.next_command()
			except ParseError:
				self.finished = True
				raise

			if command is None or command.name == CommandName.TRACK:
				self.finished = True
				break
			if command.name != CommandName.INDEX:
				continue

			index = command.value
			if int(index.index_no) <= START_INDEX:
				continue

			if int(index.index_no) != int(self.previous.index_no) + 1 or \
				index.timestamp < self.previous.timestamp:
				self.finished = True
				raise ParseError.at(ParseErrorKind.INVALID_TRACK_INDEX,
					command.position)

			self.previous = index
			return index

		return None
