"""Employee directory backend."""
