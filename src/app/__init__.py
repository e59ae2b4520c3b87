"""
Console application: settings, logging setup and the `dow` command line entry point.
"""
