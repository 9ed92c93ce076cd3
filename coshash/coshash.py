"""
CosHash — Pure Python Reference Implementation

Keyless, deterministic 512-bit digest built from a trigonometric
compression step. Not a cryptographic hash: no collision, preimage or
length-extension resistance is claimed.

Pipeline:
  P1: Padding (0x80 marker + zero fill to a multiple of 64 bytes, no length field)
  P2: Seed derivation over the unpadded input (length- and order-sensitive)
  P3: State init, 16 x 32-bit words via a MurmurHash3-style finisher
  P4: Per-block rounds
        A: parameters a, b, c from the first 12 block bytes
        B: absorb (word-wise addition of the block)
        C: sine nonlinearity (IEEE-754 double precision)
        D: LCG-seeded Fisher-Yates permutation of the state words
        E: rotate-and-XOR diffusion with the right-hand neighbour
  P5: Compression, big-endian serialization of the 16 state words

Phase C depends on the platform's libm `sin` being bit-identical across
targets. The pinned vectors in tests/test_coshash.py are the ground truth.
"""

import math
import struct

MASK32 = 0xFFFFFFFF

BLOCK_SIZE = 64
STATE_SIZE = 16
WORD_SIZE = 4
DIGEST_SIZE = STATE_SIZE * WORD_SIZE  # 512 bits, see DESIGN.md

PAD_MARKER = 0x80

GOLDEN_32 = 0x9E3779B9
MURMUR_C1 = 0x85EBCA6B
MURMUR_C2 = 0xC2B2AE35

LCG_MUL = 1664525
LCG_INC = 1013904223

# Fallbacks for blocks shorter than 4, 8 and 12 bytes
DEFAULT_PARAMS = (0x1F1F1F1F, 0x3C3C3C3C, 0x7A7A7A7A)

_I_STRUCT = struct.Struct('>I')
_16I_STRUCT = struct.Struct('>16I')


def _rotl32(x, r):
    return ((x << r) | (x >> (32 - r))) & MASK32


def _pack_tail(buf, offset):
    word = 0
    for byte in buf[offset:]:
        word = (word << 8) | byte
    return word & MASK32


def pad_input(data: bytes) -> bytes:
    """Append 0x80 and zero-fill to the next multiple of BLOCK_SIZE."""
    padded = bytearray(data)
    padded.append(PAD_MARKER)
    rem = len(padded) % BLOCK_SIZE
    if rem:
        padded.extend(b'\x00' * (BLOCK_SIZE - rem))
    return bytes(padded)


def split_blocks(padded: bytes) -> list:
    return [padded[i:i + BLOCK_SIZE] for i in range(0, len(padded), BLOCK_SIZE)]


def derive_seed(data: bytes) -> int:
    """Fold the unpadded input into a single 32-bit seed."""
    seed = len(data) & MASK32
    for x in data:
        seed ^= (x + GOLDEN_32 + (seed << 6) + (seed >> 2)) & MASK32
    return seed


def initial_mix(seed: int, index: int) -> int:
    value = (seed ^ (index * MURMUR_C1)) & MASK32
    value ^= value >> 16
    value = (value * MURMUR_C1) & MASK32
    value ^= value >> 13
    value = (value * MURMUR_C2) & MASK32
    value ^= value >> 16
    return value


def init_state(seed: int) -> list:
    return [initial_mix(seed, i) for i in range(STATE_SIZE)]


def derive_params(block: bytes) -> tuple:
    """
    Return the (a, b, c) round parameters of a block.

    Each parameter is the big-endian word at byte offset 0, 4 and 8. A
    block too short to supply a word falls back to DEFAULT_PARAMS.
    """
    unpack = _I_STRUCT.unpack_from
    params = []
    for k, default in enumerate(DEFAULT_PARAMS):
        offset = k * WORD_SIZE
        if len(block) >= offset + WORD_SIZE:
            params.append(unpack(block, offset)[0])
        else:
            params.append(default)
    return tuple(params)


def absorb(state, block):
    if len(block) >= BLOCK_SIZE:
        segments = _16I_STRUCT.unpack_from(block)
    else:
        # Short block: whatever bytes remain are packed into the last word
        segments = []
        for i in range(STATE_SIZE):
            offset = i * WORD_SIZE
            if offset + WORD_SIZE <= len(block):
                segments.append(_I_STRUCT.unpack_from(block, offset)[0])
            else:
                segments.append(_pack_tail(block, offset))
    for i in range(STATE_SIZE):
        state[i] = (state[i] + segments[i]) & MASK32


def nonlinear_mix(state, a, b, c):
    """
    Add floor(sin(a * (state[i] ^ b)) * c) to every word.

    The product is formed in double precision and the floored value is
    reduced modulo 2^32, so negative values subtract.
    """
    fa = float(a)
    fc = float(c)
    sin = math.sin
    floor = math.floor
    for i in range(STATE_SIZE):
        temp = state[i] ^ b
        sin_val = sin(fa * float(temp))
        mix = floor(sin_val * fc)
        state[i] = (state[i] + mix) & MASK32


def derive_permutation(block: bytes) -> list:
    permutation = list(range(STATE_SIZE))
    seed = 0
    for byte in block[:WORD_SIZE]:
        seed = (seed << 8) | byte
    for i in range(STATE_SIZE - 1, 0, -1):
        seed = (seed * LCG_MUL + LCG_INC) & MASK32
        j = seed % (i + 1)
        permutation[i], permutation[j] = permutation[j], permutation[i]
    return permutation


def permute(state, permutation):
    return [state[p] for p in permutation]


def diffuse(state):
    # In place: the last word rotates against the already-diffused state[0]
    for i in range(STATE_SIZE):
        neighbor = state[(i + 1) % STATE_SIZE]
        state[i] ^= _rotl32(neighbor, state[i] & 0x1F)


def process_block(state, block):
    """Run phases A-E over one block and return the next state."""
    state = list(state)
    a, b, c = derive_params(block)
    absorb(state, block)
    nonlinear_mix(state, a, b, c)
    state = permute(state, derive_permutation(block))
    diffuse(state)
    return state


def compress_state(state) -> bytes:
    return _16I_STRUCT.pack(*state)


def cos_hash(data: bytes) -> bytes:
    """Compute CosHash of the given input. Returns 64 bytes."""
    data = memoryview(data).tobytes()
    padded = pad_input(data)

    state = init_state(derive_seed(data))
    for block in split_blocks(padded):
        state = process_block(state, block)

    return compress_state(state)


def cos_hash_hex(data: bytes) -> str:
    """Return hex string representation of CosHash."""
    return cos_hash(data).hex()


if __name__ == '__main__':
    import os
    import sys
    if len(sys.argv) > 1:
        data = os.fsencode(sys.argv[1])
    else:
        data = b''
    print(cos_hash_hex(data))
