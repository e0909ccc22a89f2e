"""Locres format constants and struct layouts."""
import struct

# 16-byte signature preceding the version byte in versioned files.
# Files without it are Legacy and start directly with namespace data.
MAGIC = bytes([
    0x0E, 0x14, 0x74, 0x75, 0x67, 0x4A, 0x03, 0xFC,
    0x4A, 0x15, 0x90, 0x9D, 0xC3, 0x37, 0x7F, 0x1B,
])
MAGIC_SIZE = len(MAGIC)

# Primitive layouts (little-endian)
INT32 = struct.Struct("<i")
UINT32 = struct.Struct("<I")
INT64 = struct.Struct("<q")
UINT64 = struct.Struct("<Q")
UINT8 = struct.Struct("<B")
