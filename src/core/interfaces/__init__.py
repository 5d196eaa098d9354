"""Interfaces/abstractions of the Core.

Contracts (Protocol) implemented by transform code plugged into the dispatcher.
"""
