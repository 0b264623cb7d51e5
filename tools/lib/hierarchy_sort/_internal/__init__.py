"""Internal helpers for building and walking the item tree."""
