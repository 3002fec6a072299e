import json

from . discid.ean import Ean13
from . discid.upc import UpcA
from . errors import EanParseError, UpcParseError
from . metadata import metadata_from_remarks
from . probe.cuesheet import CueSheetProbe

CATALOG_EAN_13 = "EAN-13"
CATALOG_UPC_A = "UPC-A"

def catalog_code(value):
	"""Classifies a CATALOG value.

	Returns (type, code) for a valid EAN-13 or UPC-A barcode, otherwise
	(None, None).
	"""
	value = str(value)

	if len(value) == Ean13.PAYLOAD + 1:
		try:
			return CATALOG_EAN_13, Ean13.parse(value)
		except EanParseError:
			pass
	elif len(value) == UpcA.PAYLOAD + 1:
		try:
			return CATALOG_UPC_A, UpcA.parse(value)
		except UpcParseError:
			pass

	return None, None

def as_text(value):
	return None if value is None else str(value)

def millis(timestamp):
	return None if timestamp is None else timestamp.as_millis()

def metadata_dict(comments):
	data = metadata_from_remarks(comments)
	if data is None:
		return None

	return dict((tag, [str(v) for v in values]) for tag, values in data.items())

def file_info(album_file):
	if album_file is None:
		return None

	return {
		"name": str(album_file.name),
		"file_type": album_file.file_type,
	}

def track_info(track, metadata=False):
	sub_indexes = [index.timestamp.as_millis() for index in track.sub_indexes()]

	info = {
		"track_no": int(track.track_no),
		"data_type": track.data_type,
		"flags": track.flags.names() if track.flags is not None else None,
		"isrc": as_text(track.isrc),
		"performer": as_text(track.performer),
		"songwriter": as_text(track.songwriter),
		"title": as_text(track.title),
		"pregap": millis(track.pregap),
		"postgap": millis(track.postgap),
		"sub_indexes": sub_indexes or None,
		"time_info": {
			"start": track.start_index.as_millis(),
			"end": None,
			"pregap_start": millis(track.pregap_index),
			"duration": None,
		},
	}

	if metadata:
		info["remark_metadata"] = metadata_dict(track.metadata())

	return info

def calc_track_times(tracks):
	# a track ends where the next one (or its pregap) starts
	for track, next_track in zip(tracks, tracks[1:]):
		time_info = track["time_info"]
		next_info = next_track["time_info"]

		end = next_info["pregap_start"]
		if end is None:
			end = next_info["start"]

		time_info["end"] = end
		time_info["duration"] = end - time_info["start"]

def convert(text, metadata=False):
	"""Reads the whole cue sheet into a dict ready for serialization.

	Raises ParseError on the first problem found.
	"""
	probe = CueSheetProbe.parse(text)

	doc = {
		"catalog": as_text(probe.catalog),
		"catalog_type": catalog_code(probe.catalog)[0] \
			if probe.catalog is not None else None,
		"cdtextfile": as_text(probe.cdtextfile),
		"file": file_info(probe.file),
		"performer": as_text(probe.performer),
		"songwriter": as_text(probe.songwriter),
		"title": as_text(probe.title),
	}

	if metadata:
		doc["remark_metadata"] = metadata_dict(probe.metadata())

	doc["tracks"] = [track_info(track, metadata) for track in probe.tracks()]
	calc_track_times(doc["tracks"])

	return doc

def to_json(doc, pretty=False):
	if pretty:
		return json.dumps(doc, indent=2)

	return json.dumps(doc)
