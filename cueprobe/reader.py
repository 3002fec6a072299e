from . errors import CueParserError

import sys

from cchardet import detect as encoding_detect

class ReadError(CueParserError):
	def __init__(self, msg, filename = None):
		CueParserError.__init__(self, msg)
		self.filename = filename

def decode(data, coding = None):
	"""Decodes raw cue sheet bytes.

	Without an explicit coding utf-8 is tried first, then the encoding
	detector decides.
	"""
	if coding:
		try:
			return data.decode(coding)
		except LookupError:
			raise ReadError("unknown encoding %s" % coding)
		except UnicodeDecodeError:
			raise ReadError("failed to decode using %s" % coding)

	try:
		return data.decode("utf-8-sig")
	except UnicodeDecodeError:
		pass

	enc = encoding_detect(data)
	encoding = enc and enc.get("encoding")
	if not encoding:
		raise ReadError("autodetect failed")

	try:
		return data.decode(encoding)
	except (LookupError, UnicodeDecodeError):
		raise ReadError("autodetected encoding %s is wrong" % encoding)

def normalize(text):
	return text.replace("\r\n", "\n").replace("\r", "\n")

def read(filename, coding = None):
	"""Returns the text of a cue file, `-` reads standard input."""
	if filename == "-":
		data = sys.stdin.buffer.read()
	else:
		with open(filename, "rb") as fp:
			data = fp.read()

	try:
		return normalize(decode(data, coding))
	except ReadError as err:
		err.filename = filename
		raise
