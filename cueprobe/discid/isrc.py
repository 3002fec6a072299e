import functools

from .. core.numeric import Year, Serial
from .. errors import IsrcParseError, InvalidNumericRange

ASCII_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ASCII_ALNUM = ASCII_LETTERS + "0123456789"

def _code(s, length, alphabet, kind):
	value = s.upper()
	if len(value) != length or any(ch not in alphabet for ch in value):
		raise IsrcParseError(kind)
	return value

@functools.total_ordering
class Isrc:
	"""International Standard Recording Code, CC-OOO-YY-SSSSS."""

	LENGTH = 12

	def __init__(self, country, owner, year, serial):
		self.country = _code(country, 2, ASCII_LETTERS,
			IsrcParseError.INVALID_COUNTRY_CODE)
		self.owner = _code(owner, 3, ASCII_ALNUM, IsrcParseError.INVALID_OWNER)
		self.year = year if isinstance(year, Year) else Year(year)
		self.serial = serial if isinstance(serial, Serial) else Serial(serial)

	@classmethod
	def parse(cls, s):
		if len(s) != cls.LENGTH:
			raise IsrcParseError(IsrcParseError.INVALID_LENGTH)

		country = _code(s[0:2], 2, ASCII_LETTERS,
			IsrcParseError.INVALID_COUNTRY_CODE)
		owner = _code(s[2:5], 3, ASCII_ALNUM, IsrcParseError.INVALID_OWNER)

		try:
			year = Year.parse(s[5:7])
		except InvalidNumericRange:
			raise IsrcParseError(IsrcParseError.INVALID_YEAR)

		try:
			serial = Serial.parse(s[7:])
		except InvalidNumericRange:
			raise IsrcParseError(IsrcParseError.INVALID_SERIAL)

		return cls(country, owner, year, serial)

	def _key(self):
		return (self.country, self.owner, int(self.year), int(self.serial))

	def __eq__(self, other):
		if not isinstance(other, Isrc):
			return NotImplemented
		return self._key() == other._key()

	def __lt__(self, other):
		if not isinstance(other, Isrc):
			return NotImplemented
		return self._key() < other._key()

	def __hash__(self):
		return hash(self._key())

	def __str__(self):
		return "%s%s%s%s" % (self.country, self.owner, self.year, self.serial)

	def __repr__(self):
		return "Isrc(%s)" % self
