from . names import NameTable
from .. errors import UnknownFileType

class KnownFileType(NameTable):
	BINARY		= "BINARY"	# Intel binary, least significant byte first
	MOTOROLA	= "MOTOROLA"	# Motorola binary, most significant byte first
	AIFF		= "AIFF"
	WAVE		= "WAVE"
	MP3		= "MP3"
	FLAC		= "FLAC"	# extension, missing from the CDRWIN format

	names = (BINARY, MOTOROLA, AIFF, WAVE, MP3, FLAC)
	error = UnknownFileType

class AlbumFile:
	def __init__(self, name, file_type):
		self.name = name
		self.file_type = file_type

	def __repr__(self):
		return "AlbumFile(%r, %s)" % (str(self.name), self.file_type)
