"""Tests for the job portal app."""
