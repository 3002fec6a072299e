from . barcode import Barcode
from . checksum import calc_ean_13_checksum
from .. errors import EanParseError

class Ean13(Barcode):
	PAYLOAD = 12
	error = EanParseError

	calc_checksum = staticmethod(calc_ean_13_checksum)

	def gs1(self):
		return self.code.values()[:3]

	def item_code(self):
		return self.code.values()[3:]
