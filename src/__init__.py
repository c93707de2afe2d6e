"""binexport command dispatcher."""
