"""CLI layer — argument parsing, rendering, prompts, and error boundary.

This is the outermost layer.  It may import from ``core``; nothing in
``core`` may import from ``cli``.
"""
