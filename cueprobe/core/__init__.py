from . album_file import AlbumFile, KnownFileType
from . command import Command, CommandName
from . cuestr import CueStr
from . digits import Digits
from . flags import TrackFlag
from . numeric import BoundedNumeric, Second, Frame, TrackNo, IndexNo, Year, Serial
from . timestamp import CueTimeStamp
from . track import DataType, Track, TrackIndex
