"""World and chunk dimensions."""

CHUNK_S1 = 62
CHUNK_S2 = CHUNK_S1**2
CHUNKP_S1 = CHUNK_S1 + 2
CHUNKP_S2 = CHUNKP_S1**2
CHUNKP_S3 = CHUNKP_S1**3
CHUNK_S1I = CHUNK_S1

MAX_HEIGHT = 496
MAX_GEN_HEIGHT = 400
WATER_H = 61
Y_CHUNKS = MAX_HEIGHT // CHUNK_S1

MASK_6 = 0b111111
MASK_XYZ = 0b111111_111111_111111