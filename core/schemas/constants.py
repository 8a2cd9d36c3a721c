"""
Fixed record sizes, file names and limits shared by the on-disk stores.
"""

ADDRESS_SIZE = 20
ADDRESS_HEX_LENGTH = ADDRESS_SIZE * 2
HASH_SIZE = 32

# Sanity ceiling on the address count, not a domain limit.
MAX_ADDRESSES = 2**32

# Upper bound on sequential layer-file probing.
MAX_LAYERS = 64

ADDRESSES_FILENAME = "addresses.bin"
LAYER_FILENAME_TEMPLATE = "layer{level:02d}.bin"
DEFAULT_DATA_DIR = "merkledb"
