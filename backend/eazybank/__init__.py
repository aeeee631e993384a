"""EazyBank accounts, cards and loans services."""
