"""
Test Suite for the Expense Tracker

Test Structure:
- fixtures/: Shared test data and utilities
- unit/: Unit tests mirroring the src/ package structure
- integration/: CLI dispatch tests through click's CliRunner
- e2e/: CLI runs in a real subprocess

Test Data:
All test data is synthetic.
"""
