from .. errors import FlagParseError

class TrackFlag:
	"""Subcode flag bitset of a track."""

	DCP		= 1		# digital copy permitted
	FOUR_CHANNEL	= 1 << 1	# four channel audio
	PRE		= 1 << 2	# pre-emphasis enabled
	SCMS		= 1 << 3	# serial copy management system

	table = (
		("DCP", DCP),
		("4CH", FOUR_CHANNEL),
		("PRE", PRE),
		("SCMS", SCMS),
	)

	def __init__(self, bits=0):
		self.bits = bits

	@classmethod
	def parse(cls, s):
		if not s.isascii():
			raise FlagParseError()

		name = s.upper()
		for flag_name, bit in cls.table:
			if flag_name == name:
				return cls(bit)

		raise FlagParseError()

	def has(self, bit):
		return self.bits & bit == bit

	def names(self):
		return [name for name, bit in self.table if self.bits & bit]

	def __or__(self, other):
		if isinstance(other, TrackFlag):
			other = other.bits
		return TrackFlag(self.bits | other)

	def __and__(self, other):
		if isinstance(other, TrackFlag):
			other = other.bits
		return TrackFlag(self.bits & other)

	def __len__(self):
		return bin(self.bits).count("1")

	def __bool__(self):
		return self.bits != 0

	def __iter__(self):
		return iter(self.names())

	def __eq__(self, other):
		if isinstance(other, TrackFlag):
			return self.bits == other.bits
		if type(other) is int:
			return self.bits == other
		return NotImplemented

	def __hash__(self):
		return hash(self.bits)

	def __str__(self):
		return " ".join(self.names())

	def __repr__(self):
		return "TrackFlag(%s)" % (self or "-")
