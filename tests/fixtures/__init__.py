"""
Test Fixtures and Utilities

Shared test data and helpers for the expense tracker test suite.

This module provides:
- Synthetic expense rows and CSV files
- Environment helpers for subprocess-based E2E tests

All test data is synthetic.
"""
