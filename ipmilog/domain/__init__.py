"""Domain layer for ipmilog.

Record entities and the pure formatting services: level labels, bounded
message buffers, printf-style rendering and the hex-dump formatter.
"""
