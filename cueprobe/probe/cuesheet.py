from . builder import CueProbeBuilder
from . remark import RemarkIter, Span
from . track import TrackListProbe
from .. core.command import CommandName
from .. errors import BuildError, ParseError, ParseErrorKind
from .. lexer import CueLexer
from .. metadata import RemarkComments
from .. tokenizer import Position

ALBUM_FIELDS = {
	CommandName.CATALOG:	"catalog",
	CommandName.CDTEXTFILE:	"cdtextfile",
	CommandName.FILE:	"file",
	CommandName.PERFORMER:	"performer",
	CommandName.SONGWRITER:	"songwriter",
	CommandName.TITLE:	"title",
}

class CueSheetProbe:
	"""Album level view of a cue sheet.

	Only the commands before the first TRACK are read up front; tracks,
	their sub-indexes and remarks are read when iterated, and each call to
	tracks() or remarks() starts over. Every string value refers to the
	text passed to parse(), which must stay unchanged while the probe is
	in use.
	"""

	def __init__(self, span, tracks_probe, catalog=None, cdtextfile=None,
		file=None, performer=None, songwriter=None, title=None
	):
		self.span = span
		self.tracks_probe = tracks_probe
		self.catalog = catalog
		self.cdtextfile = cdtextfile
		self.file = file
		self.performer = performer
		self.songwriter = songwriter
		self.title = title

	@classmethod
	def parse(cls, text):
		lexer = CueLexer(text)
		builder = CueProbeBuilder(cls)
		album_end = 0
		empty = True

		while True:
			command = lexer.next_command()
			if command is None:
				break

			empty = False
			try:
				if command.name == CommandName.TRACK:
					# the remaining commands are read by the track iterators
					builder.set_attr("tracks_probe", TrackListProbe(
						lexer.snapshot(), command.value, command.position))
					break
				elif command.name in ALBUM_FIELDS:
					builder.set_attr(ALBUM_FIELDS[command.name], command.value)
				elif command.name != CommandName.REM:
					raise BuildError(ParseErrorKind.INVALID_COMMAND_USAGE)
			except BuildError as err:
				raise ParseError.at(err.kind, command.position) from err

			album_end = lexer.cursor

		if empty:
			raise ParseError.at(ParseErrorKind.EMPTY_CUESHEET, lexer.position())

		try:
			return builder.build(Span(text, 0, album_end, Position(0, 0)))
		except BuildError as err:
			raise ParseError.at(err.kind, lexer.position()) from err

	@classmethod
	def verify(cls, text):
		"""Reads every track and sub-index, raising the first ParseError."""
		probe = cls.parse(text)
		for track in probe.tracks():
			for index in track.sub_indexes():
				pass

	def tracks(self):
		return self.tracks_probe.iter()

	def remarks(self):
		return RemarkIter(self.span)

	def metadata(self):
		return RemarkComments(self.remarks())

	def __repr__(self):
		return "CueSheetProbe(title=%r)" % (
			str(self.title) if self.title is not None else None)

def parse(text):
	return CueSheetProbe.parse(text)

def verify(text):
	CueSheetProbe.verify(text)
