"""Encoders for ISO 8583 wire formats: ASCII, binary, hex, BCD, EBCDIC and BER-TLV tags."""