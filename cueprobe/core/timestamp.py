import datetime
import functools

from . digits import is_decimal
from . numeric import Second, Frame
from .. errors import TimeStampParseError, InvalidNumericRange

FRAMES_PER_SECOND = 75

SECOND_MS = 1000
MINUTE_MS = 60 * SECOND_MS
# truncated, the same value is used both ways so conversions round-trip
FRAME_MS = SECOND_MS // FRAMES_PER_SECOND

@functools.total_ordering
class CueTimeStamp:
	"""Disc position in minutes, seconds and frames (75 frames per second)."""

	def __init__(self, minute, second, frame):
		if type(minute) is not int or minute < 0:
			raise InvalidNumericRange()

		self._minute = minute
		self._second = int(second if isinstance(second, Second) else Second(second))
		self._frame = int(frame if isinstance(frame, Frame) else Frame(frame))

	@property
	def minute(self):
		return self._minute

	@property
	def second(self):
		return self._second

	@property
	def frame(self):
		return self._frame

	@classmethod
	def parse(cls, s):
		# shortest form is 0:00:00
		if len(s) < 7:
			raise TimeStampParseError(TimeStampParseError.INVALID_LENGTH)

		second_start = len(s) - 6
		frame_start = len(s) - 3

		if s[second_start] != ":":
			raise TimeStampParseError(TimeStampParseError.INVALID_CHARACTER)
		try:
			second = Second.parse(s[second_start + 1:frame_start])
		except InvalidNumericRange:
			raise TimeStampParseError(TimeStampParseError.INVALID_SECOND)

		if s[frame_start] != ":":
			raise TimeStampParseError(TimeStampParseError.INVALID_CHARACTER)
		try:
			frame = Frame.parse(s[frame_start + 1:])
		except InvalidNumericRange:
			raise TimeStampParseError(TimeStampParseError.INVALID_FRAME)

		minute = s[:second_start]
		if not is_decimal(minute):
			raise TimeStampParseError(TimeStampParseError.INVALID_MINUTE)

		# minutes have no upper bound, only int() limits them
		try:
			minute = int(minute.lstrip("0") or "0")
		except ValueError:
			raise TimeStampParseError(TimeStampParseError.INVALID_MINUTE)

		return cls(minute, second, frame)

	def as_millis(self):
		return self._minute * MINUTE_MS + self._second * SECOND_MS + \
			self._frame * FRAME_MS

	def as_frames(self):
		return (self._minute * 60 + self._second) * FRAMES_PER_SECOND + self._frame

	def as_timedelta(self):
		return datetime.timedelta(milliseconds=self.as_millis())

	@classmethod
	def from_millis(cls, value):
		if value < 0:
			raise InvalidNumericRange()

		minute, remaining = divmod(value, MINUTE_MS)
		second, remaining = divmod(remaining, SECOND_MS)
		frame = min(remaining // FRAME_MS, Frame.MAX)

		return cls(minute, second, frame)

	@classmethod
	def from_timedelta(cls, value):
		return cls.from_millis(value // datetime.timedelta(milliseconds=1))

	def _key(self):
		return (self._minute, self._second, self._frame)

	def __eq__(self, other):
		if not isinstance(other, CueTimeStamp):
			return NotImplemented
		return self._key() == other._key()

	def __lt__(self, other):
		if not isinstance(other, CueTimeStamp):
			return NotImplemented
		return self._key() < other._key()

	def __hash__(self):
		return hash(self._key())

	def __str__(self):
		return "%02d:%02d:%02d" % self._key()

	def __repr__(self):
		return "CueTimeStamp(%s)" % self
