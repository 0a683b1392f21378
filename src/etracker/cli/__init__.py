"""
Command Line Interface Package

Single `etracker` entry point: a command word followed by a free-form flag
payload, dispatched to the expense operations.
"""
