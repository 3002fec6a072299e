from . cuesheet import CueSheetProbe, parse, verify
from . remark import RemarkIter, Span
from . track import TrackProbe, Tracks, TrackSubIndexes
