"""Reference vectors for the uint64 base-32 codec.

The first group is the RFC 4648 section 10 vectors ("f", "fo", ... "foobar")
left-aligned in a 64-bit word; the second adapts the Wikipedia "sure."
examples; the rest cover the all-ones boundary and a few mixed patterns.
"""

KNOWN_VECTORS = [
    # RFC 4648
    (0x0000000000000000, "aaaaaaaaaaaaa"),  # ""
    (0x6600000000000000, "myaaaaaaaaaaa"),  # "f"
    (0x666F000000000000, "mzxqaaaaaaaaa"),  # "fo"
    (0x666F6F0000000000, "mzxw6aaaaaaaa"),  # "foo"
    (0x666F6F6200000000, "mzxw6yqaaaaaa"),  # "foob"
    (0x666F6F6261000000, "mzxw6ytbaaaaa"),  # "fooba"
    (0x666F6F6261720000, "mzxw6ytboiaaa"),  # "foobar"
    # Wikipedia
    (0x737572652E000000, "on2xezjoaaaaa"),  # "sure."
    (0x7375726500000000, "on2xeziaaaaaa"),  # "sure"
    (0x7375720000000000, "on2xeaaaaaaaa"),  # "sur"
    (0x7375000000000000, "on2qaaaaaaaaa"),  # "su"
    (0x6C6561737572652E, "nrswc43vojss4"),  # "leasure."
    (0x6561737572652E00, "mvqxg5lsmuxaa"),  # "easure."
    (0x61737572652E0000, "mfzxk4tffyaaa"),  # "asure."
    # Boundaries and mixed bits
    (0xFFFFFFFFFFFFFFFF, "7777777777776"),
    (0xFFFFFFFFFFFFFFFE, "7777777777774"),
    (0x01FFFFFFFFFFFFFA, "ah7777777777u"),
    (0x0102030405060708, "aebagbafaydqq"),
    (0x123456789ABCCDEF, "ci2fm6e2xtg66"),
    (0x8877665544332211, "rb3wmvkegmrbc"),
]

# Right length, but each holds at least one byte outside a-z2-7
CORRUPT_INPUTS = [
    "1234567890123",
    "caazbaywxamm1",
    "aaaaaaaaaaa8a",
    "kbezvysgla9au",
    "cmyzzwaxy0aaa",
    "rb9wmvkegmrbc",
]
