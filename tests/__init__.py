"""
Test suite for the liquidation core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
