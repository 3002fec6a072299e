from . import config, report, tools
from . convert import convert, to_json
from . errors import ParseError
from . probe.cuesheet import CueSheetProbe
from . reader import read, ReadError
from . tools import printf, printerr, debug, quote, msf

import argparse
import signal
import sys

def print_cue(probe):
	for attr in ("catalog", "cdtextfile", "performer", "songwriter", "title"):
		value = getattr(probe, attr)
		if value is not None:
			printf("%s: %s\n", attr.upper(), quote(str(value)))

	if probe.file is not None:
		printf("FILE %s [%s]\n", quote(str(probe.file.name)), probe.file.file_type)

	for comment in probe.metadata():
		printf("REM %s: %s\n", comment.tag, quote(str(comment.value)))

	for track in probe.tracks():
		printf("\tTRACK %s %s", track.track_no, track.data_type)
		if track.title is not None:
			printf(" %s", quote(str(track.title)))
		printf(": %s", msf(track.start_index))
		if track.pregap_index is not None:
			printf(" (pregap %s)", msf(track.pregap_index))
		printf("\n")

		for attr in ("performer", "songwriter", "isrc"):
			value = getattr(track, attr)
			if value is not None:
				printf("\t\t%s: %s\n", attr.upper(), quote(str(value)))

		if track.flags is not None:
			printf("\t\tFLAGS: %s\n", " ".join(track.flags.names()))

		for index in track.sub_indexes():
			printf("\t\tINDEX %s: %s\n", index.index_no, msf(index.timestamp))

class HelpFormatter(argparse.HelpFormatter):
	def __init__(self, *args, **kwargs):
		kwargs["max_help_position"] = 40
		argparse.HelpFormatter.__init__(self, *args, **kwargs)

def parse_args(argv, cfg):
	parser = argparse.ArgumentParser(
		prog="cueparse",
		formatter_class=HelpFormatter,
		description="cue sheet parser and validator")

	parser.add_argument("-i", "--input", default="-", metavar="FILE",
		help="cue file to read, standard input by default")

	parser.add_argument("--coding", help="encoding of the cue file")

	parser.add_argument("-v", "--verbose", choices=report.VERBOSITY,
		help="error report verbosity")

	commands = parser.add_subparsers(dest="command", metavar="COMMAND")
	commands.required = True

	commands.add_parser("verify", help="check the cue sheet")

	conv = commands.add_parser("convert", help="print the cue sheet as json")

	conv.add_argument("-o", "--output", metavar="FILE",
		help="write to file instead of standard output")

	conv.add_argument("-m", "--metadata", action="store_true",
		help="include REM metadata comments")

	conv.add_argument("-p", "--pretty-print", action="store_true",
		dest="pretty_print", help="indent output")

	commands.add_parser("show", help="print album and tracks")

	parser.set_defaults(
		coding=cfg.coding,
		verbose=cfg.verbose,
		metadata=cfg.metadata,
		pretty_print=cfg.pretty_print,
	)

	return parser.parse_args(argv)

def cmd_verify(text, options):
	CueSheetProbe.verify(text)
	debug("%s: ok", options.input)

def cmd_convert(text, options):
	out = to_json(convert(text, options.metadata), options.pretty_print)

	if options.output is None:
		printf("%s\n", out)
		return

	with open(options.output, "w") as fp:
		fp.write(out + "\n")

def cmd_show(text, options):
	print_cue(CueSheetProbe.parse(text))

COMMANDS = {
	"verify":	cmd_verify,
	"convert":	cmd_convert,
	"show":		cmd_show,
}

def sigint_handler(sig, frame):
	tools.fatal("interrupted")

def main(argv = None):
	try:
		cfg = config.load(config.CONFIG_FILE_PATH)
	except config.ConfigError as err:
		printerr("config: %s", err)
		return 1

	options = parse_args(argv, cfg)
	tools.verbose = options.verbose == report.FULL

	try:
		text = read(options.input, options.coding)
	except OSError as err:
		printerr("open %s: %s", err.filename, err.strerror)
		return 1
	except ReadError as err:
		printerr("%s: %s", err.filename, err)
		return 1

	try:
		COMMANDS[options.command](text, options)
	except ParseError as err:
		msg = report.render_error(text, err, options.verbose)
		if msg is not None:
			printerr("%s", msg)
		return 1
	except OSError as err:
		printerr("write %s: %s", err.filename, err.strerror)
		return 1

	return 0

def run():
	signal.signal(signal.SIGINT, sigint_handler)
	sys.exit(main())
