"""
Theurgy - Command implementations for Augury.

Each module corresponds to a top-level CLI command:
- build:  Assemble a VM query request
- decode: Interpret VM output returned for a query
"""
