import io

import pytest

from cueprobe import reader
from cueprobe.reader import ReadError

class TestRead:
	def test_utf8_bom(self, tmp_path):
		path = tmp_path / "a.cue"
		path.write_bytes("\ufeffTITLE \"Ça\"\r\nREM x\r".encode("utf-8"))

		assert reader.read(str(path)) == 'TITLE "Ça"\nREM x\n'

	def test_explicit_coding(self, tmp_path):
		path = tmp_path / "a.cue"
		path.write_bytes("TITLE Привет\n".encode("cp1251"))

		assert reader.read(str(path), "cp1251") == "TITLE Привет\n"

	def test_unknown_coding(self, tmp_path):
		path = tmp_path / "a.cue"
		path.write_bytes(b"TITLE x\n")

		with pytest.raises(ReadError) as info:
			reader.read(str(path), "no-such-coding")

		assert info.value.filename == str(path)

	def test_detected(self, tmp_path, monkeypatch):
		path = tmp_path / "a.cue"
		path.write_bytes("TITLE Привет\n".encode("cp1251"))
		monkeypatch.setattr(reader, "encoding_detect",
			lambda data: {"encoding": "WINDOWS-1251", "confidence": 0.9})

		assert reader.read(str(path)) == "TITLE Привет\n"

	def test_detect_failed(self, tmp_path, monkeypatch):
		path = tmp_path / "a.cue"
		path.write_bytes(b"TITLE \xff\xfe\xfa\n")
		monkeypatch.setattr(reader, "encoding_detect",
			lambda data: {"encoding": None, "confidence": None})

		with pytest.raises(ReadError):
			reader.read(str(path))

	def test_stdin(self, monkeypatch):
		monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"TITLE x\n")))

		assert reader.read("-") == "TITLE x\n"

	def test_missing(self, tmp_path):
		with pytest.raises(OSError):
			reader.read(str(tmp_path / "missing.cue"))
