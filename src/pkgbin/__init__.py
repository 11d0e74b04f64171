"""Exotic dependency pattern dispatch and global binary link reconciliation."""
