"""EMV ICC data: BER-TLV reading and writing, the known tags and typed data elements."""