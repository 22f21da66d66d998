"""
Protocol constants for pysourcequery
"""

# Every connectionless datagram starts with this prefix
SIMPLE_RESPONSE_PREFIX = b'\xFF\xFF\xFF\xFF'

# Placeholder sent in place of a challenge we do not have yet
CHALLENGE_PLACEHOLDER = b'\xFF\xFF\xFF\xFF'

# S2C_CHALLENGE ('A')
CHALLENGE_RESPONSE_HEADER = 0x41
CHALLENGE_SIGNATURE = SIMPLE_RESPONSE_PREFIX + bytes([CHALLENGE_RESPONSE_HEADER])

# Prefix plus one header byte on every server reply
REPLY_HEADER_SIZE = 5

# A2S_INFO payload
INFO_QUERY_STRING = b'Source Engine Query'

# Master server
MASTER_REQUEST_HEADER = 0x31  # '1'
MASTER_RESPONSE_PREAMBLE = SIMPLE_RESPONSE_PREFIX + b'\x66\x0A'
MASTER_ADDRESS_SIZE = 6
SENTINEL_HOST = '0.0.0.0'
SENTINEL_PORT = 0

# Filter keys whose value is a nested filter set, prefixed by its entry count
NESTED_FILTER_KEYS = ('nor', 'nand')

# Well-known master servers
MASTER_SOURCE = ('hl2master.steampowered.com', 27011)
MASTER_GOLDSRC = ('hl1master.steampowered.com', 27010)

# Default values
DEFAULT_TIMEOUT = 1.0
DEFAULT_ATTEMPTS = 1
