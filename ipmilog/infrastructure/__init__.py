"""Infrastructure layer for ipmilog.

Concrete logger adapters, the system log bridge and the dependency container.
"""
