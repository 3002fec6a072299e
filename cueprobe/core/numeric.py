import functools

from . digits import Digits, is_decimal
from .. errors import InvalidNumericRange

@functools.total_ordering
class BoundedNumeric:
	"""Unsigned integer constrained to [MIN, MAX].

	Subclasses set the bounds, the zero padded display WIDTH and the digit
	LENGTH used by as_digits().
	"""

	MIN = 0
	MAX = 0
	WIDTH = 2
	LENGTH = 2

	def __init__(self, value):
		if type(value) is not int or value < self.MIN or value > self.MAX:
			raise InvalidNumericRange()

		self._value = value

	@classmethod
	def parse(cls, s):
		if not is_decimal(s):
			raise InvalidNumericRange()

		# leading zeros are allowed, longer values are out of range anyway
		digits = s.lstrip("0") or "0"
		if len(digits) > len(str(cls.MAX)):
			raise InvalidNumericRange()

		return cls(int(digits))

	@classmethod
	def new(cls, value):
		"""Returns None instead of raising on out of range values."""
		try:
			return cls(value)
		except InvalidNumericRange:
			return None

	@property
	def value(self):
		return self._value

	def saturating_add(self, rhs):
		return type(self)(min(self._value + rhs, self.MAX))

	def saturating_sub(self, rhs):
		return type(self)(max(self._value - rhs, self.MIN))

	def as_digits(self):
		return Digits(int(ch) for ch in "%0*d" % (self.LENGTH, self._value))

	def __int__(self):
		return self._value

	def __index__(self):
		return self._value

	def __eq__(self, other):
		if isinstance(other, BoundedNumeric):
			return type(self) is type(other) and self._value == other._value
		if type(other) is int:
			return self._value == other
		return NotImplemented

	def __lt__(self, other):
		if isinstance(other, BoundedNumeric):
			return self._value < other._value
		if type(other) is int:
			return self._value < other
		return NotImplemented

	def __hash__(self):
		return hash(self._value)

	def __str__(self):
		return "%0*d" % (self.WIDTH, self._value)

	def __repr__(self):
		return "%s(%d)" % (type(self).__name__, self._value)

class Second(BoundedNumeric):
	MAX = 59

class Frame(BoundedNumeric):
	MAX = 74

class TrackNo(BoundedNumeric):
	MIN = 1
	MAX = 255
	LENGTH = 3

class IndexNo(BoundedNumeric):
	MAX = 255
	LENGTH = 3

class Year(BoundedNumeric):
	MAX = 99

class Serial(BoundedNumeric):
	MAX = 99999
	WIDTH = 5
	LENGTH = 5
