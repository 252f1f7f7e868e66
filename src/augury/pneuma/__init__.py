"""
Pneuma - Contract query layer for Augury.

Builds VM query requests and decodes the VM output returned for them.
Transport is left to the caller.
"""
