EAN_13_WEIGHTS = (1, 3) * 6
UPC_A_WEIGHTS = (3, 1) * 5 + (3,)

def calc_checksum(digits, weights):
	"""Check digit of alternating-weight barcodes (EAN, UPC)."""
	total = sum(d * w for d, w in zip(digits, weights))
	return (10 - total % 10) % 10

def calc_ean_13_checksum(digits):
	return calc_checksum(digits, EAN_13_WEIGHTS)

def calc_upc_a_checksum(digits):
	return calc_checksum(digits, UPC_A_WEIGHTS)
