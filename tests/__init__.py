"""Tests for the forest fire model."""
