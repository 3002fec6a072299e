from . barcode import Barcode
from . checksum import calc_upc_a_checksum
from .. errors import UpcParseError

class UpcA(Barcode):
	PAYLOAD = 11
	error = UpcParseError

	calc_checksum = staticmethod(calc_upc_a_checksum)

	def digit_system(self):
		return self.code[0]

	def left_part(self):
		return self.code.values()[1:6]

	def right_part(self):
		return self.code.values()[6:11]
