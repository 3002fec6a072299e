from . errors import CueParserError
from . report import VERBOSITY, DEFAULT
from . tools import debug

import configparser
import os

CONFIG_FILE_PATH = os.path.expanduser("~/.cueparse.cfg")

ConfigParserClass = configparser.RawConfigParser

class ConfigError(CueParserError):
	pass

DEFAULT_CONFIG = """[general]
# encoding of cue files, detected when not set
# coding = <encoding>

# how parse errors are reported
verbose = default

[convert]
# indent json output
pretty_print = false

# include REM metadata comments
metadata = false
"""

def create_default(name):
	with open(name, "w") as fp:
		fp.write(DEFAULT_CONFIG)

def with_default(func, msg = None):
	def method(cls, section, option, default = None):
		try:
			return func(cls.parser, section, option)
		except configparser.NoSectionError:
			return default
		except configparser.NoOptionError:
			return default
		except ValueError as err:
			raise ConfigError("%s::%s: %s" % (section, option, msg or err))
	return method

class CfgParser:
	def __init__(self):
		self.parser = ConfigParserClass()

	get = with_default(ConfigParserClass.get)
	getint = with_default(ConfigParserClass.getint, "invalid number")
	getbool = with_default(ConfigParserClass.getboolean, "invalid bool")

	def __getattr__(self, attr):
		return getattr(self.parser, attr)

class Config:
	def __init__(self, coding = None, verbose = DEFAULT,
		pretty_print = False, metadata = False
	):
		self.coding = coding
		self.verbose = verbose
		self.pretty_print = pretty_print
		self.metadata = metadata

def load(path = CONFIG_FILE_PATH, create = True):
	"""Reads the config file, writing the default one when it is missing."""
	cfg = CfgParser()

	try:
		found = cfg.read(path)
	except configparser.Error as err:
		raise ConfigError("%s: %s" % (path, err))

	if not found and create:
		try:
			create_default(path)
		except OSError as err:
			debug("create %s: %s", path, err.strerror)

	verbose = cfg.get("general", "verbose", DEFAULT)
	if verbose not in VERBOSITY:
		raise ConfigError("general::verbose: must be one of %s" % ", ".join(VERBOSITY))

	return Config(
		coding = cfg.get("general", "coding"),
		verbose = verbose,
		pretty_print = cfg.getbool("convert", "pretty_print", False),
		metadata = cfg.getbool("convert", "metadata", False),
	)
