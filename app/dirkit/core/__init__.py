"""Core infrastructure: configuration, XDG paths and platform probes."""
