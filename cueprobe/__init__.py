from . errors import (CueParserError, ValueParseError, ParseError,
	ParseErrorKind, BuildError)
from . probe import CueSheetProbe, TrackProbe, parse, verify
