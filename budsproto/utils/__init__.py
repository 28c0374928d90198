"""Byte and CRC16 checksum helpers used by the message codecs."""