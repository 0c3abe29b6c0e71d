"""Output formats for classified guide blocks."""
