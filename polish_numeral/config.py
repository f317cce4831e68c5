"""Static settings shared by the Polish numeral converter."""

MIN_SUPPORTED_VALUE = 0
MAX_SUPPORTED_VALUE = 2_147_483_647

WORD_SEPARATOR = " "

# Digits per magnitude group (units, tens, hundreds).
GROUP_SIZE = 3
MAGNITUDE_BASE = 1000
