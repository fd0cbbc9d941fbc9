"""Tests for natcmp.error"""
