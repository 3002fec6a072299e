from . names import NameTable
from .. errors import CueParserError

class UnknownCommandName(CueParserError):
	pass

class CommandName(NameTable):
	CATALOG		= "CATALOG"	# media catalog number
	CDTEXTFILE	= "CDTEXTFILE"
	FILE		= "FILE"
	FLAGS		= "FLAGS"
	INDEX		= "INDEX"
	ISRC		= "ISRC"
	PERFORMER	= "PERFORMER"
	POSTGAP		= "POSTGAP"
	PREGAP		= "PREGAP"
	REM		= "REM"
	SONGWRITER	= "SONGWRITER"
	TITLE		= "TITLE"
	TRACK		= "TRACK"

	names = (CATALOG, CDTEXTFILE, FILE, FLAGS, INDEX, ISRC, PERFORMER,
		POSTGAP, PREGAP, REM, SONGWRITER, TITLE, TRACK)
	error = UnknownCommandName

class Command:
	"""One directive read by the lexer.

	`value` depends on `name`: CueStr for CATALOG, CDTEXTFILE, PERFORMER,
	SONGWRITER and TITLE, AlbumFile for FILE, TrackFlag for FLAGS,
	TrackIndex for INDEX, Isrc for ISRC, CueTimeStamp for PREGAP and
	POSTGAP, the comment text (a CueStr view, unparsed) for REM and
	Track for TRACK.
	`position` is where the command name starts.
	"""

	def __init__(self, name, value, position):
		self.name = name
		self.value = value
		self.position = position

	def __repr__(self):
		return "Command(%s, %r)" % (self.name, self.value)
