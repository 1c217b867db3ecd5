"""Tests - Test suite for the packet decoder."""
