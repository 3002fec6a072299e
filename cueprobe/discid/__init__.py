from . checksum import calc_ean_13_checksum, calc_upc_a_checksum
from . ean import Ean13
from . isrc import Isrc
from . upc import UpcA
