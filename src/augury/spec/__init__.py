"""
Spec - Value types that make up a contract query.

Function names, call arguments, balances and gas amounts.
"""
