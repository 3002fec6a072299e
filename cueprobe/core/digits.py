from .. errors import DigitsParseError

DECIMAL = "0123456789"

def is_decimal(s):
	return len(s) > 0 and all(ch in DECIMAL for ch in s)

class Digits:
	"""Fixed size sequence of values between 0 and 9."""

	def __init__(self, values):
		values = tuple(values)
		if any(type(v) is not int or v < 0 or v > 9 for v in values):
			raise DigitsParseError()

		self._values = values

	@classmethod
	def parse(cls, s, length):
		if len(s) != length or not is_decimal(s):
			raise DigitsParseError()

		return cls(DECIMAL.index(ch) for ch in s)

	def values(self):
		return self._values

	def as_ascii(self):
		return "".join(DECIMAL[v] for v in self._values)

	def __getitem__(self, idx):
		return self._values[idx]

	def __len__(self):
		return len(self._values)

	def __iter__(self):
		return iter(self._values)

	def __eq__(self, other):
		if not isinstance(other, Digits):
			return NotImplemented
		return self._values == other._values

	def __lt__(self, other):
		if not isinstance(other, Digits):
			return NotImplemented
		return self._values < other._values

	def __hash__(self):
		return hash(self._values)

	def __str__(self):
		return self.as_ascii()

	def __repr__(self):
		return "Digits(%r)" % self.as_ascii()
