from . names import NameTable
from .. errors import DataTypeParseError

class DataType(NameTable):
	AUDIO		= "AUDIO"
	CDG		= "CDG"		# karaoke CD+G
	MODE1_2048	= "MODE1/2048"	# CD-ROM mode 1, cooked
	MODE1_2352	= "MODE1/2352"	# CD-ROM mode 1, raw
	MODE2_2336	= "MODE2/2336"	# CD-ROM XA mode 2
	MODE2_2352	= "MODE2/2352"
	CDI_2336	= "CDI/2336"	# CD-I mode 2
	CDI_2352	= "CDI/2352"

	names = (AUDIO, CDG, MODE1_2048, MODE1_2352, MODE2_2336, MODE2_2352,
		CDI_2336, CDI_2352)
	error = DataTypeParseError

class Track:
	def __init__(self, track_no, data_type):
		self.track_no = track_no
		self.data_type = data_type

	def __eq__(self, other):
		if not isinstance(other, Track):
			return NotImplemented
		return (self.track_no, self.data_type) == (other.track_no, other.data_type)

	def __hash__(self):
		return hash((self.track_no, self.data_type))

	def __repr__(self):
		return "Track(%s, %s)" % (self.track_no, self.data_type)

class TrackIndex:
	def __init__(self, index_no, timestamp):
		self.index_no = index_no
		self.timestamp = timestamp

	def __eq__(self, other):
		if not isinstance(other, TrackIndex):
			return NotImplemented
		return (self.index_no, self.timestamp) == (other.index_no, other.timestamp)

	def __hash__(self):
		return hash((self.index_no, self.timestamp))

	def __repr__(self):
		return "TrackIndex(%s, %s)" % (self.index_no, self.timestamp)
