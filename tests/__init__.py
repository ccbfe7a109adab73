"""
Test suite for metapass-issuance

Contains:
- tests/unit/          : Unit tests for individual modules and the controller
"""
