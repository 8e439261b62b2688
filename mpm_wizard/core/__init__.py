"""Core wizard logic — channel-independent, no terminal I/O."""
