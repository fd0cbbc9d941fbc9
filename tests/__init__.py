"""Tests for natcmp"""
