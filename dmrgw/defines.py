"""Frame sizes, sync patterns, data types and other DMR protocol constants."""

from enum import IntEnum

VERSION = "20250607"

DMR_FRAME_LENGTH_BITS = 264
DMR_FRAME_LENGTH_BYTES = 33

DMR_SYNC_LENGTH_BITS = 48
DMR_SYNC_LENGTH_BYTES = 6

DMR_EMB_LENGTH_BITS = 8
DMR_EMB_LENGTH_BYTES = 1

DMR_SLOT_TYPE_LENGTH_BITS = 8
DMR_SLOT_TYPE_LENGTH_BYTES = 1

DMR_EMBEDDED_SIGNALLING_LENGTH_BITS = 32
DMR_EMBEDDED_SIGNALLING_LENGTH_BYTES = 4

DMR_AMBE_LENGTH_BITS = 108 * 2
DMR_AMBE_LENGTH_BYTES = 27

BS_SOURCED_AUDIO_SYNC = bytes((0x07, 0x55, 0xFD, 0x7D, 0xF7, 0x5F, 0x70))
BS_SOURCED_DATA_SYNC = bytes((0x0D, 0xFF, 0x57, 0xD7, 0x5D, 0xF5, 0xD0))

MS_SOURCED_AUDIO_SYNC = bytes((0x07, 0xF7, 0xD5, 0xDD, 0x57, 0xDF, 0xD0))
MS_SOURCED_DATA_SYNC = bytes((0x0D, 0x5D, 0x7F, 0x77, 0xFD, 0x75, 0x70))

DIRECT_SLOT1_AUDIO_SYNC = bytes((0x05, 0xD5, 0x77, 0xF7, 0x75, 0x7F, 0xF0))
DIRECT_SLOT1_DATA_SYNC = bytes((0x0F, 0x7F, 0xDD, 0x5D, 0xDF, 0xD5, 0x50))

DIRECT_SLOT2_AUDIO_SYNC = bytes((0x07, 0xDF, 0xFD, 0x5F, 0x55, 0xD5, 0xF0))
DIRECT_SLOT2_DATA_SYNC = bytes((0x0D, 0x75, 0x57, 0xF5, 0xFF, 0x7F, 0x50))

SYNC_MASK = bytes((0x0F, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xF0))

PAYLOAD_LEFT_MASK = bytes([0xFF] * 13 + [0xF0])
PAYLOAD_RIGHT_MASK = bytes([0x0F] + [0xFF] * 13)

VOICE_LC_HEADER_CRC_MASK = bytes((0x96, 0x96, 0x96))
TERMINATOR_WITH_LC_CRC_MASK = bytes((0x99, 0x99, 0x99))
PI_HEADER_CRC_MASK = bytes((0x69, 0x69))
DATA_HEADER_CRC_MASK = bytes((0xCC, 0xCC))
CSBK_CRC_MASK = bytes((0xA5, 0xA5))

DMR_SLOT_TIME = 60
AMBE_PER_SLOT = 3

DT_MASK = 0x0F
DT_VOICE_PI_HEADER = 0x00
DT_VOICE_LC_HEADER = 0x01
DT_TERMINATOR_WITH_LC = 0x02
DT_CSBK = 0x03
DT_DATA_HEADER = 0x06
DT_RATE_12_DATA = 0x07
DT_RATE_34_DATA = 0x08
DT_IDLE = 0x09
DT_RATE_1_DATA = 0x0A

# Values outside the on-air data type range, used internally for voice frames.
DT_VOICE_SYNC = 0xF0
DT_VOICE = 0xF1

DMR_IDLE_RX = 0x80
DMR_SYNC_DATA = 0x40
DMR_SYNC_AUDIO = 0x20

DMR_SLOT1 = 0x00
DMR_SLOT2 = 0x80

DPF_UDT = 0x00
DPF_RESPONSE = 0x01
DPF_UNCONFIRMED_DATA = 0x02
DPF_CONFIRMED_DATA = 0x03
DPF_DEFINED_SHORT = 0x0D
DPF_DEFINED_RAW = 0x0E
DPF_PROPRIETARY = 0x0F

FID_ETSI = 0
FID_DMRA = 16


class FLCO(IntEnum):
    """Full link control opcodes."""

    GROUP = 0
    USER_USER = 3
    TALKER_ALIAS_HEADER = 4
    TALKER_ALIAS_BLOCK1 = 5
    TALKER_ALIAS_BLOCK2 = 6
    TALKER_ALIAS_BLOCK3 = 7
    GPS_INFO = 8