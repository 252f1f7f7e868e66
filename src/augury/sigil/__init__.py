"""
Sigil - Account identity for Augury.

Addresses are 32-byte public keys rendered in bech32 form.
"""
