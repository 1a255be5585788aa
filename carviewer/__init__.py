"""Car catalog viewer: aggregates, filters and ranks catalog data by observed interest."""
