#!/usr/bin/env python3
"""
End-to-end tests for the etracker package.

These tests execute the CLI via subprocess against a temporary data directory
to validate complete workflows from the user's perspective.
"""
