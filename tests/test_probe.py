import pytest

import cueprobe
from cueprobe import ParseError, ParseErrorKind
from cueprobe.core import CueTimeStamp, KnownFileType, TrackFlag
from cueprobe.errors import CueStrError

def parse_error(text, full=True):
	with pytest.raises(ParseError) as info:
		if full:
			cueprobe.verify(text)
		else:
			cueprobe.parse(text)

	return info.value

class TestAlbum:
	def test_fields(self, sheet):
		probe = cueprobe.parse(sheet)

		assert probe.title == "The Dark Side of the Moon"
		assert probe.performer == "Pink Floyd"
		assert probe.catalog == "4006381333931"
		assert probe.file.name == "album.flac"
		assert probe.file.file_type == KnownFileType.FLAC
		assert probe.songwriter is None
		assert probe.cdtextfile is None

	def test_values_refer_to_text(self, sheet):
		probe = cueprobe.parse(sheet)

		assert probe.title.buffer is sheet

	def test_remarks(self, sheet):
		probe = cueprobe.parse(sheet)

		assert list(probe.remarks()) == ['GENRE "Progressive Rock"', "DATE 1973"]
		assert list(probe.remarks()) == list(probe.remarks())

	def test_remarks_refer_to_text(self, sheet):
		probe = cueprobe.parse(sheet)

		assert all(remark.buffer is sheet for remark in probe.remarks())
		assert all(c.value.buffer is sheet for c in probe.metadata())

	def test_metadata(self, sheet):
		probe = cueprobe.parse(sheet)

		assert [(c.tag, str(c.value)) for c in probe.metadata()] == [
			("GENRE", "Progressive Rock"), ("DATE", "1973")]

	def test_verify(self, sheet):
		assert cueprobe.verify(sheet) is None

class TestTracks:
	def test_tracks(self, sheet):
		tracks = list(cueprobe.parse(sheet).tracks())

		assert [int(t.track_no) for t in tracks] == [1, 2, 3]
		assert [t.title for t in tracks] == ["Speak to Me", "Breathe", None]

	def test_indexes(self, sheet):
		first, second, third = cueprobe.parse(sheet).tracks()

		assert first.pregap_index is None
		assert first.start_index.as_millis() == 0
		assert list(first.sub_indexes()) == []

		assert second.pregap_index.as_millis() == 65000
		assert second.start_index.as_millis() == 67130
		assert [str(i.timestamp) for i in second.sub_indexes()] == [
			"02:00:00", "02:30:00"]
		assert [int(i.index_no) for i in second.indexes()] == [2, 3]

		assert third.pregap == CueTimeStamp(0, 2, 0)
		assert third.start_index == CueTimeStamp(3, 50, 0)

	def test_track_fields(self, sheet):
		second = list(cueprobe.parse(sheet).tracks())[1]

		assert second.flags.has(TrackFlag.DCP | TrackFlag.PRE)
		assert second.flags.names() == ["DCP", "PRE"]
		assert str(second.isrc) == "GBAYE7300001"
		assert second.data_type == "AUDIO"
		assert second.postgap is None

	def test_track_remarks(self, sheet):
		first, second, third = cueprobe.parse(sheet).tracks()

		assert list(first.remarks()) == ['COMPOSER "Nick Mason"']
		assert list(second.remarks()) == []
		assert [c.tag for c in first.metadata()] == ["COMPOSER"]

	def test_restartable(self, sheet):
		probe = cueprobe.parse(sheet)

		a = probe.tracks()
		b = probe.tracks()
		next(a)
		next(a)

		assert int(next(b).track_no) == 1
		assert int(next(a).track_no) == 3
		assert next(a, None) is None
		assert a.next_track() is None

	def test_sub_indexes_restartable(self, sheet):
		second = list(cueprobe.parse(sheet).tracks())[1]

		assert list(second.sub_indexes()) == list(second.sub_indexes())

class TestScenarios:
	def test_single_track(self):
		probe = cueprobe.parse('FILE "a.bin" BINARY\nTRACK 01 AUDIO\nINDEX 01 00:00:00\n')
		tracks = list(probe.tracks())

		assert len(tracks) == 1
		assert tracks[0].data_type == "AUDIO"
		assert tracks[0].start_index.as_millis() == 0
		assert tracks[0].pregap_index is None
		assert list(tracks[0].sub_indexes()) == []

	def test_pregap_index(self):
		probe = cueprobe.parse("TRACK 01 AUDIO\nINDEX 00 00:00:00\nINDEX 01 02:00:00\n")
		track = next(probe.tracks())

		assert track.pregap_index.as_millis() == 0
		assert track.start_index.as_millis() == 120000

	def test_duplicate_catalog(self):
		err = parse_error("CATALOG 1234567890123\nCATALOG 1234567890124\n"
			"TRACK 01 AUDIO\nINDEX 01 00:00:00\n", full=False)

		assert err.kind == ParseErrorKind.MULTIPLE_COMMAND
		assert err.line == 1

	def test_unterminated_quote(self):
		err = parse_error('TITLE "unterminated\nTRACK 01 AUDIO\n', full=False)

		assert err.kind == ParseErrorKind.CUE_STR
		assert (err.line, err.column) == (0, 6)
		assert err.cause.kind == CueStrError.MISSING_ENDING_QUOTE

class TestErrors:
	@pytest.mark.parametrize("text, kind, line", [
		("", ParseErrorKind.EMPTY_CUESHEET, 0),
		("\n  \n\n", ParseErrorKind.EMPTY_CUESHEET, 3),
		("TITLE x\nREM y\n", ParseErrorKind.MISSING_TRACK_COMMAND, 2),
		("ISRC USRC17607839\nTRACK 01 AUDIO\nINDEX 01 00:00:00\n",
			ParseErrorKind.INVALID_COMMAND_USAGE, 0),
		("TITLE x\nINDEX 01 00:00:00\nTRACK 01 AUDIO\n",
			ParseErrorKind.INVALID_COMMAND_USAGE, 1),
		("TITLE x\nTITLE y\nTRACK 01 AUDIO\n", ParseErrorKind.MULTIPLE_COMMAND, 1),
	])
	def test_album(self, text, kind, line):
		err = parse_error(text, full=False)

		assert err.kind == kind
		assert err.line == line

	@pytest.mark.parametrize("text, kind, line", [
		# numbering
		("TRACK 01 AUDIO\nINDEX 01 00:00:00\nTRACK 03 AUDIO\nINDEX 01 00:10:00\n",
			ParseErrorKind.INVALID_TRACK_NO, 2),
		("TRACK 02 AUDIO\nINDEX 01 00:00:00\nTRACK 02 AUDIO\nINDEX 01 00:10:00\n",
			ParseErrorKind.INVALID_TRACK_NO, 2),
		("TRACK 255 AUDIO\nINDEX 01 00:00:00\nTRACK 255 AUDIO\nINDEX 01 00:10:00\n",
			ParseErrorKind.INVALID_TRACK_NO, 2),
		# indexes
		("TRACK 01 AUDIO\nTITLE x\n", ParseErrorKind.INVALID_TRACK_INDEX, 0),
		("TRACK 01 AUDIO\nINDEX 01 00:10:00\nINDEX 00 00:05:00\n",
			ParseErrorKind.INVALID_TRACK_INDEX, 2),
		("TRACK 01 AUDIO\nINDEX 00 00:00:00\nINDEX 00 00:01:00\nINDEX 01 00:02:00\n",
			ParseErrorKind.INVALID_TRACK_INDEX, 2),
		("TRACK 01 AUDIO\nINDEX 02 00:10:00\nINDEX 01 00:05:00\n",
			ParseErrorKind.INVALID_TRACK_INDEX, 1),
		("TRACK 01 AUDIO\nINDEX 01 00:00:00\nINDEX 01 00:05:00\n",
			ParseErrorKind.MULTIPLE_COMMAND, 2),
		# fields
		("TRACK 01 AUDIO\nTITLE a\nTITLE b\nINDEX 01 00:00:00\n",
			ParseErrorKind.MULTIPLE_COMMAND, 2),
		("TRACK 01 AUDIO\nINDEX 01 00:00:00\nFILE x.wav WAVE\n",
			ParseErrorKind.INVALID_COMMAND_USAGE, 2),
		("TRACK 01 AUDIO\nCATALOG 4006381333931\nINDEX 01 00:00:00\n",
			ParseErrorKind.INVALID_COMMAND_USAGE, 1),
	])
	def test_tracks(self, text, kind, line):
		probe = cueprobe.parse(text)

		with pytest.raises(ParseError) as info:
			list(probe.tracks())

		assert info.value.kind == kind
		assert info.value.line == line

		assert parse_error(text).kind == kind

	@pytest.mark.parametrize("text, line", [
		("TRACK 01 AUDIO\nINDEX 01 00:10:00\nINDEX 02 00:05:00\n", 2),
		("TRACK 01 AUDIO\nINDEX 01 00:10:00\nINDEX 03 00:20:00\n", 2),
		("TRACK 01 AUDIO\nINDEX 01 00:00:00\nINDEX 02 00:10:00\n"
			"INDEX 03 00:09:74\n", 3),
	])
	def test_sub_indexes(self, text, line):
		track = next(cueprobe.parse(text).tracks())

		with pytest.raises(ParseError) as info:
			list(track.sub_indexes())

		assert info.value.kind == ParseErrorKind.INVALID_TRACK_INDEX
		assert info.value.line == line

		assert parse_error(text).line == line

	def test_sub_indexes_stop_at_next_track(self):
		text = ("TRACK 01 AUDIO\nINDEX 01 00:00:00\nINDEX 02 00:01:00\n"
			"TRACK 02 AUDIO\nINDEX 01 00:02:00\nINDEX 02 00:03:00\n")
		first, second = cueprobe.parse(text).tracks()

		assert [str(i.timestamp) for i in first.sub_indexes()] == ["00:01:00"]
		assert [str(i.timestamp) for i in second.sub_indexes()] == ["00:03:00"]

	def test_lexer_error_in_track(self):
		probe = cueprobe.parse("TRACK 01 AUDIO\nINDEX 01 00:00:00\nINDEX 02 00:99:00\n")

		with pytest.raises(ParseError) as info:
			list(probe.tracks())

		assert info.value.kind == ParseErrorKind.TIMESTAMP
		assert (info.value.line, info.value.column) == (2, 9)

	def test_tracks_end_after_lexer_error(self):
		probe = cueprobe.parse("TRACK 01 AUDIO\nINDEX 01 00:00:00\nINDEX 02 00:99:00\n"
			"TRACK 02 AUDIO\nINDEX 01 00:10:00\n")
		tracks = probe.tracks()

		with pytest.raises(ParseError):
			next(tracks)

		assert next(tracks, None) is None

	def test_long_numbers(self):
		text = "TRACK " + "0" * 5000 + "1 AUDIO\nINDEX 01 " + "0" * 5000 + "1:00:00\n"
		track = next(cueprobe.parse(text).tracks())

		assert track.track_no == 1
		assert track.start_index == CueTimeStamp(1, 0, 0)

		err = parse_error("TRACK 1" + "0" * 5000 + " AUDIO\n", full=False)
		assert err.kind == ParseErrorKind.NUMERIC_RANGE

	def test_message(self):
		err = parse_error("")

		assert str(err) == "parse error, empty cuesheet input"
		assert isinstance(err, cueprobe.CueParserError)
