import sys

PROGNAME = "cueparse"

# set by the command line front-end
verbose = False

def quote(s):
	"""Writes s the way a cue sheet would, quoted and escaped when needed."""
	if s and not any(ch.isspace() or ch in '"\\' for ch in s):
		return s

	return '"%s"' % s.replace("\\", "\\\\").replace('"', '\\"')

def emit(stream, tag, msg):
	"""Writes msg to stream, `<prog>: <tag>: ` in front of its first line."""
	if not msg.endswith("\n"):
		msg += "\n"

	stream.write("%s: %s: %s" % (PROGNAME, tag, msg))

def printf(fmt, *args):
	out = fmt % args
	sys.stdout.write(out)

	if not out.endswith("\n"):
		sys.stdout.flush()

def printerr(fmt, *args):
	emit(sys.stderr, "error", fmt % args)

def fatal(fmt, *args):
	printerr(fmt, *args)
	sys.exit(1)

def debug(fmt, *args):
	if verbose:
		emit(sys.stderr, "debug", fmt % args)

def msf(timestamp):
	return "%d:%02d.%02d" % (timestamp.minute, timestamp.second, timestamp.frame)
