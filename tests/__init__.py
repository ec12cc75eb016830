"""Test suite for the belongings hub relay.

Unit tests live under unit/<domain>/ and are collected by conftest.py;
shared fakes and client helpers live in helpers/.
"""
