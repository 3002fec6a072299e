class CueParserError(Exception):
	pass

class ValueParseError(CueParserError, ValueError):
	message = "invalid value"

	def __str__(self):
		return self.message

class KindError(ValueParseError):
	"""Value error with a sub-kind, rendered as '<prefix>: <kind message>'."""

	prefix = ""
	messages = {}

	def __init__(self, kind):
		ValueParseError.__init__(self, kind)
		self.kind = kind

	def __str__(self):
		return "%s: %s" % (self.prefix, self.messages.get(self.kind, self.kind))

class UnknownFileType(ValueParseError):
	message = "unknown file type"

class InvalidNumericRange(ValueParseError):
	message = "numeric range is invalid"

class DigitsParseError(ValueParseError):
	message = "failed to parse digits"

class DataTypeParseError(ValueParseError):
	message = "failed to parse data type"

class FlagParseError(ValueParseError):
	message = "failed to parse flag"

class TimeStampParseError(KindError):
	(
		INVALID_LENGTH,
		INVALID_CHARACTER,
		INVALID_MINUTE,
		INVALID_SECOND,
		INVALID_FRAME
	) = ("InvalidLength", "InvalidCharacter", "InvalidMinute",
		"InvalidSecond", "InvalidFrame")

	prefix = "invalid timestamp"
	messages = {
		INVALID_LENGTH:		"timestamp length is incorrect",
		INVALID_CHARACTER:	"timestamp contains invalid character",
		INVALID_MINUTE:		"timestamp minute is invalid",
		INVALID_SECOND:		"timestamp second is invalid",
		INVALID_FRAME:		"timestamp frame is invalid",
	}

class CueStrError(KindError):
	(
		MISSING_QUOTES,
		MISSING_ENDING_QUOTE,
		UNESCAPED_SPECIAL_CHAR
	) = ("MissingQuotes", "MissingEndingQuote", "UnescapedSpecialChar")

	prefix = "invalid cue string"
	messages = {
		MISSING_QUOTES:		"string needs to be quoted",
		MISSING_ENDING_QUOTE:	"string is missing ending double quote",
		UNESCAPED_SPECIAL_CHAR:	"unescaped special character found",
	}

class IsrcParseError(KindError):
	(
		INVALID_LENGTH,
		INVALID_OWNER,
		INVALID_COUNTRY_CODE,
		INVALID_SERIAL,
		INVALID_YEAR
	) = ("InvalidLength", "InvalidOwner", "InvalidCountryCode",
		"InvalidSerial", "InvalidYear")

	prefix = "invalid ISRC string"
	messages = {
		INVALID_LENGTH:		"ISRC string has invalid length",
		INVALID_OWNER:		"ISRC string has invalid owner code",
		INVALID_COUNTRY_CODE:	"ISRC string has invalid country code",
		INVALID_SERIAL:		"ISRC string has invalid serial number",
		INVALID_YEAR:		"ISRC string has invalid year",
	}

class EanParseError(KindError):
	(
		INVALID_CHARACTER,
		INVALID_LENGTH,
		CHECKSUM_FAIL
	) = ("InvalidCharacter", "InvalidLength", "ChecksumFail")

	prefix = "invalid EAN string"
	messages = {
		INVALID_CHARACTER:	"EAN string contains invalid character",
		INVALID_LENGTH:		"EAN string has invalid length",
		CHECKSUM_FAIL:		"EAN string failed checksum validation",
	}

class UpcParseError(KindError):
	(
		INVALID_CHARACTER,
		INVALID_LENGTH,
		CHECKSUM_FAIL
	) = ("InvalidCharacter", "InvalidLength", "ChecksumFail")

	prefix = "invalid UPC string"
	messages = {
		INVALID_CHARACTER:	"UPC string contains invalid character",
		INVALID_LENGTH:		"UPC string has invalid length",
		CHECKSUM_FAIL:		"UPC string failed checksum validation",
	}

class ParseErrorKind:
	CUE_STR			= "CueStrError"
	DATA_TYPE		= "DataTypeParseError"
	DIGITS			= "DigitsParseError"
	FLAG			= "FlagParseError"
	INVALID_COMMAND_FORMAT	= "InvalidCommandFormat"
	NUMERIC_RANGE		= "InvalidNumericRange"
	ISRC			= "IsrcParseError"
	TIMESTAMP		= "TimeStampParseError"
	UNKNOWN_COMMAND		= "UnknownCommand"
	UNKNOWN_FILE_TYPE	= "UnknownFileType"
	INVALID_CUESHEET_FORMAT	= "InvalidCueSheetFormat"
	INVALID_COMMAND_USAGE	= "InvalidCommandUsage"
	EMPTY_CUESHEET		= "EmptyCueSheet"
	MULTIPLE_COMMAND	= "MultipleCommand"
	INVALID_TRACK_NO	= "InvalidTrackNo"
	INVALID_TRACK_INDEX	= "InvalidTrackIndex"
	MISSING_TRACK_INDEX	= "MissingTrackIndex"
	MISSING_TRACK_COMMAND	= "MissingTrackCommand"

	messages = {
		EMPTY_CUESHEET:		"empty cuesheet input",
		INVALID_COMMAND_FORMAT:	"invalid cuesheet command format",
		INVALID_COMMAND_USAGE:	"invalid cuesheet command usage",
		INVALID_CUESHEET_FORMAT: "invalid cuesheet format",
		UNKNOWN_COMMAND:	"unknown cuesheet command",
		MULTIPLE_COMMAND:	"command can only be used once",
		INVALID_TRACK_NO:	"invalid track number",
		INVALID_TRACK_INDEX:	"invalid track index",
		MISSING_TRACK_COMMAND:	"at least one track must be specified",
		MISSING_TRACK_INDEX:	"at least one track index must be specified",
	}

	by_error = {
		CueStrError:		CUE_STR,
		DataTypeParseError:	DATA_TYPE,
		DigitsParseError:	DIGITS,
		FlagParseError:		FLAG,
		InvalidNumericRange:	NUMERIC_RANGE,
		IsrcParseError:		ISRC,
		TimeStampParseError:	TIMESTAMP,
		UnknownFileType:	UNKNOWN_FILE_TYPE,
	}

	@classmethod
	def of(cls, error):
		for error_type in type(error).__mro__:
			kind = cls.by_error.get(error_type)
			if kind is not None:
				return kind

		return cls.INVALID_CUESHEET_FORMAT

class ParseError(CueParserError):
	"""Located parse failure.

	`line` and `column` are zero-based; `column` is 0 when only the line is
	known. The value error that caused it, if any, is kept in `cause` (and
	chained as `__cause__` by the raiser).
	"""

	def __init__(self, kind, line, column=0, cause=None):
		CueParserError.__init__(self, kind, line, column)
		self.kind = kind
		self.line = line
		self.column = column
		self.cause = cause

	@classmethod
	def at(cls, kind, position, cause=None):
		return cls(kind, position.line, position.column, cause)

	@classmethod
	def wrap(cls, error, position):
		return cls.at(ParseErrorKind.of(error), position, error)

	def describe(self):
		if self.cause is not None:
			return str(self.cause)

		return ParseErrorKind.messages.get(self.kind, self.kind)

	def __str__(self):
		return "parse error, %s" % self.describe()

	def __repr__(self):
		return "ParseError(%s, line=%d, column=%d)" % (
			self.kind, self.line, self.column)

class BuildError(CueParserError):
	"""Raised by probe builders; the probe adds the location."""

	def __init__(self, kind):
		CueParserError.__init__(self, kind)
		self.kind = kind

class InvalidMetadataTagName(ValueParseError):
	message = "invalid metadata tag name"
