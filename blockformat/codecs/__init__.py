"""Block codec contract, registry and built-in codecs."""
