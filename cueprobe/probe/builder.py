from .. errors import BuildError, ParseErrorKind

class ProbeBuilder:
	"""Collects single-use fields; setting one twice is an error."""

	fields = ()

	def __init__(self, probe_type):
		self.probe_type = probe_type
		self._attrs = {}

	def set_attr(self, attr, value):
		if attr not in self.fields:
			raise BuildError(ParseErrorKind.INVALID_COMMAND_USAGE)
		if attr in self._attrs:
			raise BuildError(ParseErrorKind.MULTIPLE_COMMAND)

		self._attrs[attr] = value

	def has(self, attr):
		return attr in self._attrs

class CueProbeBuilder(ProbeBuilder):
	fields = ("catalog", "cdtextfile", "file", "performer", "songwriter",
		"title", "tracks_probe")

	def build(self, album_span):
		if not self.has("tracks_probe"):
			raise BuildError(ParseErrorKind.MISSING_TRACK_COMMAND)

		return self.probe_type(album_span, **self._attrs)

class TrackProbeBuilder(ProbeBuilder):
	fields = ("flags", "isrc", "performer", "postgap", "pregap",
		"songwriter", "title")

	def __init__(self, probe_type, track, index_lexer):
		ProbeBuilder.__init__(self, probe_type)
		self.track = track
		self.index_lexer = index_lexer
		self.pregap_index = None
		self.start_index = None

	def set_pregap_index(self, timestamp):
		# INDEX 00 has to come before INDEX 01
		if self.start_index is not None or self.pregap_index is not None:
			raise BuildError(ParseErrorKind.INVALID_TRACK_INDEX)

		self.pregap_index = timestamp

	def set_start_index(self, timestamp):
		if self.start_index is not None:
			raise BuildError(ParseErrorKind.MULTIPLE_COMMAND)

		self.start_index = timestamp

	def add_sub_index(self, index):
		# INDEX 02 and up are validated lazily, they only need INDEX 01 first
		if self.start_index is None:
			raise BuildError(ParseErrorKind.INVALID_TRACK_INDEX)

	def build(self, track_span):
		if self.start_index is None:
			raise BuildError(ParseErrorKind.INVALID_TRACK_INDEX)

		return self.probe_type(self.track, track_span, self.index_lexer,
			self.start_index, self.pregap_index, **self._attrs)
