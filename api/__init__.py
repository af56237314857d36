"""HTTP read access to the seeded employees collection."""
