QUIET = "quiet"
DEFAULT = "default"
FULL = "full"

VERBOSITY = (QUIET, DEFAULT, FULL)

def source_line(text, line):
	lines = text.split("\n")
	if 0 <= line < len(lines):
		return lines[line]
	return ""

def render_error(text, err, verbosity = DEFAULT):
	"""Formats a ParseError for the user, None when nothing is to be shown.

	Line and column are printed 1-based.
	"""
	if verbosity == QUIET:
		return None

	msg = "%s (line %d, column %d)" % (err, err.line + 1, err.column + 1)
	if verbosity != FULL:
		return msg

	src = source_line(text, err.line).expandtabs(1)
	number = "%d | " % (err.line + 1)
	pointer = " " * (len(number) + err.column) + "^"

	return "\n".join((msg, number + src, pointer))
