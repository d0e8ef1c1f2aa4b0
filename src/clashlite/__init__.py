"""Lane-based card battle simulation."""
