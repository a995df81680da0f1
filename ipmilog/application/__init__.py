"""Application layer for ipmilog.

Ports that the logger adapters implement and that host code depends on.
"""
