"""HRMS Lite package.

A single-screen HR client: a Flask layer drives an immutable view state
whose data comes from a remote employee/attendance API.
"""
