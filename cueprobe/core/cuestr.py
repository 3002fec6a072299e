from .. errors import CueStrError

class CueStr:
	"""String value borrowed from the cue sheet text.

	Only the buffer reference and the [start, end) offsets are kept, the
	text itself is never copied until it is asked for. A CueStr must not be
	used after the buffer it came from is discarded or modified.
	"""

	(
		TEXT,
		QUOTED,
		QUOTED_ESCAPED
	) = ("Text", "QuotedText", "QuotedTextWithEscape")

	def __init__(self, buffer, start, end, kind):
		self.buffer = buffer
		self.start = start
		self.end = end
		self.kind = kind

	@classmethod
	def from_raw_str(cls, s):
		n = len(s)

		if n > 1 and s[0] == '"':
			has_escape = False
			i = 1
			while i < n:
				ch = s[i]
				if ch == '"':
					if i != n - 1:
						raise CueStrError(CueStrError.UNESCAPED_SPECIAL_CHAR)
					kind = cls.QUOTED_ESCAPED if has_escape else cls.QUOTED
					return cls(s, 0, n, kind)
				if ch == "\\":
					if i + 1 >= n:
						break
					if s[i + 1] not in '"\\':
						raise CueStrError(CueStrError.UNESCAPED_SPECIAL_CHAR)
					has_escape = True
					i += 2
					continue
				i += 1

			raise CueStrError(CueStrError.MISSING_ENDING_QUOTE)

		if any(ch.isspace() for ch in s):
			raise CueStrError(CueStrError.MISSING_QUOTES)

		return cls(s, 0, n, cls.TEXT)

	def is_quoted(self):
		return self.kind != self.TEXT

	def as_raw(self):
		"""Source text exactly as written, quotes and escapes included."""
		return self.buffer[self.start:self.end]

	def _inner(self):
		assert self.end - self.start > 1, \
			"quoted CueStr shorter than two characters, tokenizer is broken"
		return self.start + 1, self.end - 1

	def _unescaped(self):
		start, end = self._inner()
		buffer = self.buffer
		i = start
		while i < end:
			if buffer[i] == "\\":
				i += 1
			yield buffer[i]
			i += 1

	def __len__(self):
		if self.kind == self.TEXT:
			return self.end - self.start
		if self.kind == self.QUOTED:
			return self.end - self.start - 2
		return sum(1 for _ in self._unescaped())

	def __str__(self):
		if self.kind == self.TEXT:
			return self.as_raw()
		if self.kind == self.QUOTED:
			start, end = self._inner()
			return self.buffer[start:end]
		return "".join(self._unescaped())

	def __eq__(self, other):
		if isinstance(other, CueStr):
			if self.kind == other.kind and self.kind != self.QUOTED_ESCAPED:
				return self.as_raw() == other.as_raw()
			other = str(other)

		if not isinstance(other, str):
			return NotImplemented

		if self.kind == self.TEXT:
			return self.end - self.start == len(other) and \
				self.buffer.startswith(other, self.start, self.end)

		if self.kind == self.QUOTED:
			start, end = self._inner()
			return end - start == len(other) and \
				self.buffer.startswith(other, start, end)

		chars = self._unescaped()
		for rhs in other:
			if next(chars, None) != rhs:
				return False
		return next(chars, None) is None

	def __hash__(self):
		return hash(str(self))

	def __repr__(self):
		return "CueStr(%s, %r)" % (self.kind, self.as_raw())
