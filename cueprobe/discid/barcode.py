import functools

from .. core.digits import Digits, DECIMAL
from .. errors import DigitsParseError

@functools.total_ordering
class Barcode:
	"""Payload digits followed by one check digit.

	Subclasses set PAYLOAD, the checksum function and the parse error type.
	"""

	PAYLOAD = 0
	error = None

	def __init__(self, code):
		if not isinstance(code, Digits):
			code = Digits(code)
		if len(code) != self.PAYLOAD:
			raise DigitsParseError()

		self.code = code
		self.checksum = self.calc_checksum(code)

	@staticmethod
	def calc_checksum(code):
		raise NotImplementedError

	@classmethod
	def parse(cls, s):
		if len(s) != cls.PAYLOAD + 1:
			raise cls.error(cls.error.INVALID_LENGTH)

		try:
			code = Digits.parse(s[:-1], cls.PAYLOAD)
		except DigitsParseError:
			raise cls.error(cls.error.INVALID_CHARACTER)

		if s[-1] not in DECIMAL:
			raise cls.error(cls.error.INVALID_CHARACTER)

		barcode = cls(code)
		if barcode.checksum != DECIMAL.index(s[-1]):
			raise cls.error(cls.error.CHECKSUM_FAIL)

		return barcode

	def values(self):
		return self.code.values() + (self.checksum,)

	def __eq__(self, other):
		if type(other) is not type(self):
			return NotImplemented
		return self.code == other.code

	def __lt__(self, other):
		if type(other) is not type(self):
			return NotImplemented
		return self.code < other.code

	def __hash__(self):
		return hash(self.code)

	def __str__(self):
		return self.code.as_ascii() + DECIMAL[self.checksum]

	def __repr__(self):
		return "%s(%s)" % (type(self).__name__, self)
