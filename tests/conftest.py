import pytest

SHEET = (
	'REM GENRE "Progressive Rock"\n'
	'REM DATE 1973\n'
	'CATALOG 4006381333931\n'
	'PERFORMER "Pink Floyd"\n'
	'TITLE "The Dark Side of the Moon"\n'
	'FILE "album.flac" FLAC\n'
	'  TRACK 01 AUDIO\n'
	'    TITLE "Speak to Me"\n'
	'    REM COMPOSER "Nick Mason"\n'
	'    INDEX 01 00:00:00\n'
	'  TRACK 02 AUDIO\n'
	'    TITLE Breathe\n'
	'    FLAGS DCP PRE\n'
	'    ISRC GBAYE7300001\n'
	'    INDEX 00 01:05:00\n'
	'    INDEX 01 01:07:10\n'
	'    INDEX 02 02:00:00\n'
	'    INDEX 03 02:30:00\n'
	'  TRACK 03 AUDIO\n'
	'    PREGAP 00:02:00\n'
	'    INDEX 01 03:50:00\n'
)

@pytest.fixture
def sheet():
	return SHEET
