WORD_BITS        = 15
WORD_MODULUS     = 1 << WORD_BITS      # 32768, all arithmetic wraps here
WORD_MASK        = WORD_MODULUS - 1    # 0x7FFF
MAX_LITERAL      = WORD_MASK

REGISTERS        = 8
REGISTER_BASE    = WORD_MODULUS        # raw 32768..32775 -> r0..r7
REGISTER_LAST    = REGISTER_BASE + REGISTERS - 1

CELL_MASK        = 0xFFFF              # memory cells are 16 bits wide
MAX_ADDRESS      = 0xFFFF
MEMORY_SIZE      = MAX_ADDRESS + 1

WORD_SIZE        = 2                   # bytes per cell in a program image
IMAGE_FMT        = '<H'                # little-endian unsigned 16-bit
