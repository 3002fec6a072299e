from . core.cuestr import CueStr
from . core.names import NameTable
from . errors import CueParserError, InvalidMetadataTagName
from . tokenizer import CueTokenizer, Token

class VorbisTagName(NameTable):
	"""Vorbis comment field names accepted in REM lines."""

	names = (
		"ACOUSTID_FINGERPRINT", "ACOUSTID_ID", "ALBUM", "ALBUMARTIST",
		"ALBUMARTISTSORT", "ALBUMSORT", "ARRANGER", "ARTIST", "ARTISTS",
		"ARTISTSORT", "ASIN", "BARCODE", "BPM", "CATALOGNUMBER", "COMMENT",
		"COMPILATION", "COMPOSER", "COMPOSERSORT", "CONDUCTOR", "COPYRIGHT",
		"DATE", "DIRECTOR", "DISCID", "DISCNUMBER", "DISCSUBTITLE",
		"DISCTOTAL", "DJMIXER", "ENCODEDBY", "ENCODERSETTINGS", "ENGINEER",
		"GENRE", "GROUPING", "ISRC", "KEY", "LABEL", "LANGUAGE", "LICENSE",
		"LYRICIST", "LYRICS", "MEDIA", "MIXER", "MOOD", "MOVEMENT",
		"MOVEMENTNAME", "MOVEMENTTOTAL", "ORIGINALDATE", "ORIGINALFILENAME",
		"ORIGINALYEAR", "PERFORMER", "PRODUCER", "RATING", "RELEASECOUNTRY",
		"RELEASESTATUS", "RELEASETYPE", "REMIXER", "REPLAYGAIN_ALBUM_GAIN",
		"REPLAYGAIN_ALBUM_PEAK", "REPLAYGAIN_ALBUM_RANGE",
		"REPLAYGAIN_REFERENCE_LOUDNESS", "REPLAYGAIN_TRACK_GAIN",
		"REPLAYGAIN_TRACK_PEAK", "REPLAYGAIN_TRACK_RANGE", "SCRIPT",
		"SHOWMOVEMENT", "SUBTITLE", "TITLE", "TITLESORT", "TRACKNUMBER",
		"TRACKTOTAL", "WEBSITE", "WORK", "WRITER",
	)

	error = InvalidMetadataTagName

class RemarkComment:
	"""A REM line of the form `REM <TAG> <value>`."""

	def __init__(self, tag, value):
		self.tag = tag
		self.value = value

	@classmethod
	def parse(cls, line):
		if isinstance(line, CueStr):
			# read in place, the value stays a view into the cue sheet
			tokenizer = CueTokenizer(line.buffer, line.start, line.end)
		else:
			tokenizer = CueTokenizer(line.strip())

		try:
			tag = tokenizer.next_token()
			value = tokenizer.next_token()
			rest = tokenizer.next_token()
		except CueParserError:
			raise InvalidMetadataTagName()

		if tag is None or value is None or not value.is_text():
			raise InvalidMetadataTagName()
		# only the line feed may follow the value
		if rest is not None and rest.kind != Token.LF:
			raise InvalidMetadataTagName()
		if not tag.is_plain_text():
			raise InvalidMetadataTagName()

		return cls(VorbisTagName.parse(tag.value.as_raw()), value.value)

	@classmethod
	def from_line(cls, line):
		"""Returns a RemarkComment, or None when the line is not metadata."""
		try:
			return cls.parse(line)
		except InvalidMetadataTagName:
			return None

	def __eq__(self, other):
		if not isinstance(other, RemarkComment):
			return NotImplemented
		return self.tag == other.tag and self.value == other.value

	def __repr__(self):
		return "RemarkComment(%s, %r)" % (self.tag, str(self.value))

class RemarkComments:
	"""Yields the metadata comments of a remark iterator, skipping the rest."""

	def __init__(self, remarks):
		self.remarks = remarks

	def __iter__(self):
		return self

	def __next__(self):
		for line in self.remarks:
			comment = RemarkComment.from_line(line)
			if comment is not None:
				return comment

		raise StopIteration

def metadata_from_remarks(comments):
	"""Groups comment values by tag; None when there are no comments."""
	result = {}

	for comment in comments:
		result.setdefault(comment.tag, []).append(comment.value)

	return result or None
