class NameTable:
	"""Closed set of upper-case tags, matched ignoring ASCII case only."""

	names = ()
	error = ValueError

	@classmethod
	def parse(cls, s):
		if not cls.is_valid(s):
			raise cls.error()

		return s.upper()

	@classmethod
	def is_valid(cls, s):
		# str.upper() folds some non-ASCII letters into ASCII ones
		return s.isascii() and s.upper() in cls.names
